# -- Submersion Damping Model -- #

'''
Velocity damping of a sphere moving through the water surface.

The damping coefficient follows the quadratic drag law

    c = 0.5 * rho * |v|^2 * A_ref * Cd

with a reference area that depends on how deep the sphere sits:

    DRY     -> no damping
    PARTIAL -> disc where the water plane cuts the sphere
    DEEP    -> equatorial disc (maximal cross-section)

At exactly half submersion the water plane passes through the center,
where both areas equal pi * r^2, so the coefficient is continuous at the
PARTIAL/DEEP boundary. The regime is recomputed every tick with no
hysteresis.

The host integrator uses c as an exponential velocity-decay rate for
both linear and angular velocity, not as a force.

References:
-----------
Drag equation: https://en.wikipedia.org/wiki/Drag_equation
Sphere drag coefficient: https://en.wikipedia.org/wiki/Drag_coefficient
'''

from __future__ import annotations

import numpy as np

from FloatSim.buoyancy.protocols import PhysicsConfig, SubmersionRegime
from FloatSim.buoyancy.submersion import (
    crossSectionArea,
    offCenterCrossSectionArea,
    validateRadius,
)


def submergedOffset(radius: float, centerY: float, waterHeight: float) -> float:
    '''
    Height of the sphere bottom above the water surface [m].

    Negative once the sphere touches the water; below -radius more
    than half of the sphere is submerged.
    '''
    return (centerY - waterHeight) - radius


def classifyRegime(radius: float, centerY: float, waterHeight: float) -> SubmersionRegime:
    '''Submersion regime of a sphere relative to the water surface.'''
    validateRadius(radius)
    offset = submergedOffset(radius, centerY, waterHeight)

    if offset >= 0.0:
        return SubmersionRegime.DRY
    if offset < -radius:
        return SubmersionRegime.DEEP
    return SubmersionRegime.PARTIAL


def referenceArea(radius: float, centerY: float, waterHeight: float) -> float:
    '''
    Drag reference area for the current submersion regime [m^2].

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    centerY : float
        Vertical position of the sphere center [m]
    waterHeight : float
        Local water surface height [m]

    Returns:
    --------
    float : Reference area [m^2]
    '''
    regime = classifyRegime(radius, centerY, waterHeight)

    if regime is SubmersionRegime.DRY:
        return 0.0
    if regime is SubmersionRegime.DEEP:
        return crossSectionArea(radius)

    # radius + offset is the signed distance from the center to the surface
    offset = submergedOffset(radius, centerY, waterHeight)
    return offCenterCrossSectionArea(radius, radius + offset)


def dragDamping(
    speed: float,
    referenceArea: float,
    dragCoefficient: float,
    liquidDensity: float,
) -> float:
    '''
    Quadratic drag law c = 0.5 * rho * v^2 * A * Cd.

    Parameters:
    -----------
    speed : float
        Speed relative to the liquid [m/s]
    referenceArea : float
        Reference (cross-section) area [m^2]
    dragCoefficient : float
        Shape drag coefficient
    liquidDensity : float
        Liquid density

    Returns:
    --------
    float : Damping coefficient
    '''
    return 0.5 * liquidDensity * speed * speed * referenceArea * dragCoefficient


class DampingModel:
    '''
    Regime-dependent quadratic drag damping for spherical floats.

    The liquid is at rest, so the relative velocity is the body velocity.
    '''

    def __init__(self, config: PhysicsConfig | None = None) -> None:
        self._config = config if config is not None else PhysicsConfig()

    @property
    def config(self) -> PhysicsConfig:
        return self._config

    def dampingCoefficient(
        self,
        radius: float,
        centerY: float,
        waterHeight: float,
        velocity: np.ndarray,
    ) -> float:
        '''
        Damping coefficient for a sphere at a given height and velocity.

        Parameters:
        -----------
        radius : float
            Sphere radius [m]
        centerY : float
            Vertical position of the sphere center [m]
        waterHeight : float
            Local water surface height [m]
        velocity : np.ndarray
            Linear velocity [m/s], shape (3,)

        Returns:
        --------
        float : Damping coefficient (>= 0), shared by the linear and
                angular channels
        '''
        area = referenceArea(radius, centerY, waterHeight)
        if area == 0.0:
            return 0.0

        speed = float(np.linalg.norm(velocity))
        return dragDamping(
            speed, area, self._config.dragCoefficient, self._config.liquidDensity
        )
