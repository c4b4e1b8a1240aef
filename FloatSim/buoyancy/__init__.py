# -- Buoyancy Subpackage -- #

'''
Float buoyancy model: water surface, sphere submersion geometry,
Archimedes force, quadratic drag damping, and the per-tick update.
'''

from FloatSim.buoyancy.protocols import (
    FloatBody,
    FloatOutput,
    InvalidFloatBodyError,
    NonSphericalShapeError,
    PhysicsConfig,
    SubmersionRegime,
    SurfaceModel,
    TickReport,
    UP_AXIS,
)
from FloatSim.buoyancy.waterSurface import StillWater, TravelingSineWave, sampleHeights
from FloatSim.buoyancy.buoyancyForce import BuoyancyModel
from FloatSim.buoyancy.damping import DampingModel
from FloatSim.buoyancy.tickUpdate import FloatUpdater, updateFloats
