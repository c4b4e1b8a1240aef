# -- Host Rigid-Body Integrator -- #

'''
Minimal stand-in for the host engine's rigid-body step.

Advances floats under gravity plus the external force and damping the
buoyancy model wrote onto them. Damping is applied as exponential
velocity decay,

    v <- v / (1 + dt * c)

to both linear and angular velocity, the way the target rigid-body
engine consumes its damping coefficients.

Update sequence (semi-implicit Euler):
    v(t+dt) = v(t) + (F / m + g) * dt      (kick)
    v(t+dt) = v(t+dt) / (1 + dt * c)       (damp)
    x(t+dt) = x(t) + v(t+dt) * dt          (drift)

Joints, collisions, and rotation of the body frame are not modeled.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from FloatSim.buoyancy.protocols import FloatBody, UP_AXIS


@dataclass
class SimulatedFloat:
    '''
    A float body with the host-side state the integrator needs.

    Parameters:
    -----------
    body : FloatBody
        Float record read and written by the buoyancy model
    massKg : float
        Body mass
    angularVelocity : np.ndarray
        Angular velocity [rad/s], shape (3,)
    '''

    body: FloatBody
    massKg: float
    angularVelocity: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        if self.massKg <= 0.0:
            raise ValueError(f'Float mass must be positive, got {self.massKg}')


class SemiImplicitEuler:
    '''Semi-implicit Euler step with exponential velocity damping.'''

    def __init__(self, gravity: float) -> None:
        self._gravityVector = -UP_AXIS * gravity

    def integrate(self, floats: Iterable[SimulatedFloat], dt: float) -> None:
        '''
        Advance floats by one time step.

        Parameters:
        -----------
        floats : Iterable[SimulatedFloat]
            Floats to advance
        dt : float
            Time step size [s]
        '''
        for sim in floats:
            body = sim.body

            # Kick
            acceleration = body.force / sim.massKg + self._gravityVector
            velocity = body.velocity + acceleration * dt

            # Damp
            velocity = velocity / (1.0 + dt * body.linearDamping)
            sim.angularVelocity = sim.angularVelocity / (1.0 + dt * body.angularDamping)

            # Drift
            body.velocity = velocity
            body.position = body.position + velocity * dt
