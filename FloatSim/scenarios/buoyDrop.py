# -- Buoy Drop Scenario -- #

'''
Floats released above the water and left to settle.

The 'raft' preset places four buoys at the corners of a square raft
footprint, the layout used to suspend a raft in the interactive demo.
The raft body and the joints tying the buoys to it belong to the host
engine and are not simulated here, so each buoy moves on its own.
'''

from __future__ import annotations

import numpy as np

from FloatSim import constants as const
from FloatSim.buoyancy.protocols import FloatBody
from FloatSim.buoyancy.submersion import fullVolume
from FloatSim.scenarios.config import SimulationConfig
from FloatSim.scenarios.hostIntegrator import SimulatedFloat


def raftBuoyOffsets(halfSize: float = const.raftHalfSize) -> list[np.ndarray]:
    '''Buoy offsets from the raft center, one per corner.'''
    return [
        np.array([-halfSize, 0.0, halfSize]),
        np.array([halfSize, 0.0, halfSize]),
        np.array([-halfSize, 0.0, -halfSize]),
        np.array([halfSize, 0.0, -halfSize]),
    ]


def floatMass(radius: float, density: float) -> float:
    '''Mass of a solid sphere of the given radius and density.'''
    return density * fullVolume(radius)


def createBuoyDrop(config: SimulationConfig) -> list[SimulatedFloat]:
    '''
    Build the floats for a buoy drop scenario.

    Parameters:
    -----------
    config : SimulationConfig
        Scenario configuration

    Returns:
    --------
    list[SimulatedFloat] : Floats at rest at the spawn height
    '''
    spawnAt = np.array([0.0, config.spawnHeight, 0.0])

    if config.preset == 'single':
        offsets = [np.zeros(3)]
    else:
        offsets = raftBuoyOffsets()

    massKg = floatMass(config.floatRadius, config.floatDensity)

    floats = []
    for i, offset in enumerate(offsets):
        body = FloatBody(
            name=f'buoy{i}',
            position=spawnAt + offset,
            radius=config.floatRadius,
        )
        floats.append(SimulatedFloat(body=body, massKg=massKg))

    return floats
