# -- Scenarios Subpackage -- #

'''
Run configuration, host stand-in integrator, and float scenarios.
'''

from FloatSim.scenarios.config import SimulationConfig
from FloatSim.scenarios.hostIntegrator import SemiImplicitEuler, SimulatedFloat
from FloatSim.scenarios.buoyDrop import createBuoyDrop
