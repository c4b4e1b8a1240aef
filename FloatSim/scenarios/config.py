# -- Float Simulation Configuration -- #

'''
Configuration for float simulation runs.

Holds the physical constants passed to the buoyancy model together
with the scenario layout, wave, and stepping parameters used by the
runner. Presets cover a single buoy and the four-buoy raft layout;
JSON files override any subset of the defaults.
'''

from __future__ import annotations

import json
from dataclasses import dataclass, field

from FloatSim import constants as const
from FloatSim.buoyancy.protocols import PhysicsConfig, SurfaceModel
from FloatSim.buoyancy.waterSurface import StillWater, TravelingSineWave


PRESETS = ('single', 'raft')
SURFACES = ('wave', 'still')


@dataclass
class SimulationConfig:
    '''
    Configuration for a float simulation.

    Parameters:
    -----------
    physics : PhysicsConfig
        Liquid density, gravity, and drag coefficient
    preset : str
        Float layout: 'single' or 'raft' (four buoys at raft corners)
    surface : str
        Water surface: 'wave' (traveling sine) or 'still'
    floatRadius : float
        Float sphere radius [m]
    floatDensity : float
        Float material density (same units as liquid density)
    spawnHeight : float
        Initial center height of the floats [m]
    endTime : float
        Simulation end time [s]
    timeStep : float
        Fixed host time step [s]
    outputInterval : float
        Time between recorded frames [s]
    waveAmplitude : float
        Traveling wave amplitude [m]
    waveAngularFrequency : float
        Traveling wave angular frequency [rad/s]
    waveWavenumber : float
        Traveling wave wavenumber [rad/m]
    '''

    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    preset: str = 'raft'
    surface: str = 'wave'
    floatRadius: float = const.defaultFloatRadius
    floatDensity: float = const.defaultFloatDensity
    spawnHeight: float = const.defaultSpawnHeight
    endTime: float = 10.0
    timeStep: float = const.defaultTimeStep
    outputInterval: float = 0.05
    waveAmplitude: float = 1.0
    waveAngularFrequency: float = 1.0
    waveWavenumber: float = 1.0

    def __post_init__(self) -> None:
        if self.preset not in PRESETS:
            raise ValueError(f'Unknown preset: {self.preset} (expected one of {PRESETS})')
        if self.surface not in SURFACES:
            raise ValueError(f'Unknown surface: {self.surface} (expected one of {SURFACES})')
        if self.timeStep <= 0.0:
            raise ValueError(f'Time step must be positive, got {self.timeStep}')
        if self.outputInterval <= 0.0:
            raise ValueError(f'Output interval must be positive, got {self.outputInterval}')
        if self.floatDensity < 0.0:
            raise ValueError(f'Float density must be non-negative, got {self.floatDensity}')

    @property
    def nSteps(self) -> int:
        '''Number of fixed steps needed to reach endTime.'''
        return int(round(self.endTime / self.timeStep))

    def buildSurface(self) -> SurfaceModel:
        '''Water surface model selected by this configuration.'''
        if self.surface == 'still':
            return StillWater(level=0.0)
        return TravelingSineWave(
            amplitude=self.waveAmplitude,
            angularFrequency=self.waveAngularFrequency,
            wavenumber=self.waveWavenumber,
        )

    @classmethod
    def singleBuoy(cls) -> SimulationConfig:
        '''One buoy dropped into still water.'''
        return cls(preset='single', surface='still', endTime=8.0)

    @classmethod
    def raft(cls) -> SimulationConfig:
        '''Four raft-corner buoys dropped onto the traveling wave.'''
        return cls(preset='raft', surface='wave', endTime=10.0)

    @classmethod
    def fromJson(cls, configPath: str) -> SimulationConfig:
        '''
        Load configuration from a JSON file.

        Reads the 'fluid', 'float', 'simulation', and 'wave' sections.
        Missing keys keep their defaults.

        Parameters:
        -----------
        configPath : str
            Path to the JSON configuration file

        Returns:
        --------
        SimulationConfig : Loaded configuration
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)

        return cls.fromDict(data)

    @classmethod
    def fromDict(cls, data: dict) -> SimulationConfig:
        '''Build a configuration from parsed JSON sections.'''
        fluidSection = data.get('fluid', {})
        floatSection = data.get('float', {})
        simSection = data.get('simulation', {})
        waveSection = data.get('wave', {})

        physics = PhysicsConfig(
            liquidDensity=fluidSection.get('density', const.liquidDensity),
            gravity=fluidSection.get('gravity', const.gravity),
            dragCoefficient=floatSection.get('dragCoefficient', const.sphereDragCoefficient),
        )

        return cls(
            physics=physics,
            preset=simSection.get('preset', 'raft'),
            surface=simSection.get('surface', 'wave'),
            floatRadius=floatSection.get('radius', const.defaultFloatRadius),
            floatDensity=floatSection.get('density', const.defaultFloatDensity),
            spawnHeight=simSection.get('spawnHeight', const.defaultSpawnHeight),
            endTime=simSection.get('endTime', 10.0),
            timeStep=simSection.get('timeStep', const.defaultTimeStep),
            outputInterval=simSection.get('outputInterval', 0.05),
            waveAmplitude=waveSection.get('amplitude', 1.0),
            waveAngularFrequency=waveSection.get('angularFrequency', 1.0),
            waveWavenumber=waveSection.get('wavenumber', 1.0),
        )

    def toDict(self) -> dict:
        '''Configuration as JSON-serializable sections.'''
        return {
            'fluid': {
                'density': self.physics.liquidDensity,
                'gravity': self.physics.gravity,
            },
            'float': {
                'dragCoefficient': self.physics.dragCoefficient,
                'radius': self.floatRadius,
                'density': self.floatDensity,
            },
            'simulation': {
                'preset': self.preset,
                'surface': self.surface,
                'spawnHeight': self.spawnHeight,
                'endTime': self.endTime,
                'timeStep': self.timeStep,
                'outputInterval': self.outputInterval,
            },
            'wave': {
                'amplitude': self.waveAmplitude,
                'angularFrequency': self.waveAngularFrequency,
                'wavenumber': self.waveWavenumber,
            },
        }
