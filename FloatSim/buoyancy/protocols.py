# -- Float Buoyancy Protocols -- #

'''
Data records, result dataclasses, and protocols for the float buoyancy model.

The host engine owns every FloatBody. The buoyancy model only reads a
body's position, velocity, and radius, and overwrites its force and
damping outputs once per tick.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import numpy as np

from FloatSim import constants as const


# Vertical axis of the host engine (y up)
UP_AXIS: np.ndarray = np.array([0.0, 1.0, 0.0])


######################################################################
# -- Physical Configuration -- #
######################################################################

@dataclass(frozen=True)
class PhysicsConfig:
    '''
    Process-wide constants of the liquid and the floats.

    Parameters:
    -----------
    liquidDensity : float
        Density of the liquid (engine-scaled)
    gravity : float
        Gravitational acceleration magnitude [m/s^2]
    dragCoefficient : float
        Drag coefficient of the float shape (sphere)
    '''

    liquidDensity: float = const.liquidDensity
    gravity: float = const.gravity
    dragCoefficient: float = const.sphereDragCoefficient

    def __post_init__(self) -> None:
        if self.liquidDensity < 0.0:
            raise ValueError(f'Liquid density must be non-negative, got {self.liquidDensity}')
        if self.gravity < 0.0:
            raise ValueError(f'Gravity magnitude must be non-negative, got {self.gravity}')
        if self.dragCoefficient < 0.0:
            raise ValueError(f'Drag coefficient must be non-negative, got {self.dragCoefficient}')


######################################################################
# -- Errors -- #
######################################################################

class InvalidFloatBodyError(ValueError):
    '''Float body state the sphere model cannot be evaluated on.'''


class NonSphericalShapeError(InvalidFloatBodyError):
    '''Float body whose collision shape is not a sphere.'''


######################################################################
# -- Submersion Regime -- #
######################################################################

class SubmersionRegime(Enum):
    '''
    Submersion state of a sphere relative to the local water surface.

    DRY     : bottom of the sphere at or above the surface
    PARTIAL : at most half the sphere below the surface
    DEEP    : more than half the sphere below the surface
    '''

    DRY = 'dry'
    PARTIAL = 'partial'
    DEEP = 'deep'


######################################################################
# -- Float Body Record -- #
######################################################################

def _zeroVector() -> np.ndarray:
    return np.zeros(3)


@dataclass
class FloatBody:
    '''
    Host-owned state of a single spherical float.

    Parameters:
    -----------
    name : str
        Identifier used in tick reports
    position : np.ndarray
        World-space center position [m], shape (3,), y vertical
    velocity : np.ndarray
        Linear velocity [m/s], shape (3,)
    radius : float
        Sphere radius [m], must be positive
    shape : str
        Collision shape name; only 'sphere' is supported
    force : np.ndarray
        Output: external force for the next host step [N], shape (3,)
    linearDamping : float
        Output: linear damping coefficient
    angularDamping : float
        Output: angular damping coefficient (same value as linearDamping)
    '''

    name: str
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=_zeroVector)
    radius: float = 0.5
    shape: str = 'sphere'
    force: np.ndarray = field(default_factory=_zeroVector)
    linearDamping: float = 0.0
    angularDamping: float = 0.0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)
        self.velocity = np.asarray(self.velocity, dtype=float)
        self.force = np.asarray(self.force, dtype=float)

    @property
    def centerY(self) -> float:
        '''Vertical coordinate of the sphere center [m].'''
        return float(self.position[1])

    @property
    def speed(self) -> float:
        '''Magnitude of the linear velocity [m/s].'''
        return float(np.linalg.norm(self.velocity))


######################################################################
# -- Results -- #
######################################################################

@dataclass
class FloatOutput:
    '''
    Force and damping derived for one float on one tick.

    Parameters:
    -----------
    force : np.ndarray
        Buoyant force [N], shape (3,), vertical only
    damping : float
        Damping coefficient for both linear and angular channels
    displacedVolume : float
        Submerged sphere volume [m^3]
    waterHeight : float
        Local water surface height under the float [m]
    regime : SubmersionRegime
        Submersion regime used for the damping reference area
    '''

    force: np.ndarray
    damping: float
    displacedVolume: float
    waterHeight: float
    regime: SubmersionRegime


@dataclass
class TickReport:
    '''
    Outcome of one tick of float updates.

    Parameters:
    -----------
    elapsedTime : float
        Simulated time the tick was evaluated at [s]
    outputs : dict[str, FloatOutput]
        Results for bodies that were updated, keyed by body name
    failures : dict[str, str]
        Error messages for bodies that were rejected, keyed by body name
    '''

    elapsedTime: float
    outputs: dict[str, FloatOutput] = field(default_factory=dict)
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def nUpdated(self) -> int:
        '''Number of bodies whose outputs were written.'''
        return len(self.outputs)

    @property
    def ok(self) -> bool:
        '''True if no body was rejected this tick.'''
        return not self.failures


######################################################################
# -- Surface Protocol -- #
######################################################################

class SurfaceModel(Protocol):
    '''Protocol for water surface height models.'''

    def height(self, elapsedTime: float, horizontalX: float) -> float:
        '''Surface height [m] at horizontal position x and time t.'''
        ...
