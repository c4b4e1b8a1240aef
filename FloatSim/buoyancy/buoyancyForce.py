# -- Buoyant Force Model -- #

'''
Archimedes buoyancy for spherical floats.

The force always acts straight up through the body's reference point.
No center-of-buoyancy offset is computed, so buoyancy never produces
torque.

Also solves for the resting height of a float in still water using
root-finding on the buoyancy - weight residual.
'''

from __future__ import annotations

import numpy as np
from scipy.optimize import brentq

from FloatSim.buoyancy.protocols import PhysicsConfig, UP_AXIS
from FloatSim.buoyancy.submersion import displacedVolume, fullVolume


class BuoyancyModel:
    '''
    Archimedes buoyancy force for displaced liquid volumes.

    F_b = up * rho_liquid * V_displaced * g
    '''

    def __init__(self, config: PhysicsConfig | None = None) -> None:
        '''
        Initialize buoyancy model.

        Parameters:
        -----------
        config : PhysicsConfig
            Liquid density and gravity (defaults from constants)
        '''
        self._config = config if config is not None else PhysicsConfig()

    @property
    def config(self) -> PhysicsConfig:
        return self._config

    def buoyancyMagnitude(self, displacedVolume: float) -> float:
        '''Upward buoyant force magnitude [N] for a displaced volume [m^3].'''
        if displacedVolume < 0.0:
            raise ValueError(f'Displaced volume must be non-negative, got {displacedVolume}')
        return self._config.liquidDensity * displacedVolume * self._config.gravity

    def buoyantForce(self, displacedVolume: float) -> np.ndarray:
        '''
        Buoyant force vector.

        Parameters:
        -----------
        displacedVolume : float
            Volume of liquid displaced by the body [m^3]

        Returns:
        --------
        np.ndarray : Force [N], shape (3,), along the up axis
        '''
        return UP_AXIS * self.buoyancyMagnitude(displacedVolume)

    def findEquilibriumCenterY(
        self, radius: float, massKg: float, waterHeight: float = 0.0
    ) -> float:
        '''
        Center height at which buoyancy balances the float's weight.

        Uses scipy.optimize.brentq on:
            f(y) = rho * g * V_displaced(y) - m * g
        over y in [waterHeight - r, waterHeight + r]. The residual is
        monotonic in y, so the bracket holds whenever the float can
        support its own weight.

        Parameters:
        -----------
        radius : float
            Sphere radius [m]
        massKg : float
            Float mass
        waterHeight : float
            Still water level [m]

        Returns:
        --------
        float : Equilibrium center height [m]; waterHeight - radius if
                the fully submerged float still cannot carry its weight
        '''
        weight = massKg * self._config.gravity

        def residual(centerY: float) -> float:
            '''Residual: buoyancy - weight.'''
            return self.buoyancyMagnitude(displacedVolume(radius, centerY, waterHeight)) - weight

        lower = waterHeight - radius
        upper = waterHeight + radius

        if self.buoyancyMagnitude(fullVolume(radius)) <= weight:
            # Float sinks
            return lower

        if weight <= 0.0:
            return upper

        return brentq(residual, lower, upper, xtol=1e-9)
