# -- FloatSim Package -- #

'''
Buoyancy and submersion damping for spherical floats.

Computes, once per host simulation tick, the Archimedes lift force and
the quadratic drag damping coefficient of each float from its position,
velocity, and radius and the local height of a time-varying water
surface. Includes a small host stand-in and CLI runner for buoy drop
demonstrations.
'''

__version__ = '0.1.0'

from FloatSim.buoyancy import (
    FloatBody,
    FloatUpdater,
    PhysicsConfig,
    StillWater,
    TravelingSineWave,
    updateFloats,
)
from FloatSim.scenarios.config import SimulationConfig
from FloatSim.runner import FloatSimRunner
