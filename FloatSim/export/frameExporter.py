# -- Float Frame Exporter -- #

'''
Exports float simulation frames as JSON for visualization.

Collects per-tick float state during the simulation loop and writes it
to a single JSON file with the run configuration and per-buoy history
arrays for plotting.
'''

from __future__ import annotations

import json
import os
from datetime import datetime

import numpy as np

from FloatSim.buoyancy.protocols import TickReport
from FloatSim.buoyancy.submersion import fullVolume
from FloatSim.scenarios.config import SimulationConfig
from FloatSim.scenarios.hostIntegrator import SimulatedFloat


class FrameExporter:
    '''
    Collects and exports float frame data as JSON.

    Usage:
        exporter = FrameExporter()
        # During simulation loop:
        exporter.addFrame(report, floats)
        # After simulation:
        exporter.export(config, outputDir='output')

    Output JSON format:
    {
        "meta": { "type": "floatSim", "nFrames": 201, "created": "...", ... },
        "config": { "fluid": {...}, "float": {...}, ... },
        "frames": [
            {
                "time": 0.0,
                "floats": {
                    "buoy0": {
                        "position": [x, y, z],
                        "velocity": [vx, vy, vz],
                        "force": [fx, fy, fz],
                        "damping": c,
                        "regime": "dry"
                    },
                    ...
                }
            },
            ...
        ],
        "history": {
            "times": [...],
            "buoy0": { "centerY": [...], "waterHeight": [...], "submergedFraction": [...] },
            ...
        }
    }
    '''

    def __init__(self) -> None:
        self._frames: list[dict] = []
        self._history: dict = {'times': []}

    @property
    def nFrames(self) -> int:
        '''Number of collected frames.'''
        return len(self._frames)

    @property
    def history(self) -> dict:
        '''Per-buoy time series collected so far.'''
        return self._history

    def addFrame(self, report: TickReport, floats: list[SimulatedFloat]) -> None:
        '''
        Record a simulation frame.

        Bodies rejected on this tick are stored without regime or
        water height.

        Parameters:
        -----------
        report : TickReport
            Outputs of the tick just evaluated
        floats : list[SimulatedFloat]
            Current float states
        '''
        frameFloats = {}
        self._history['times'].append(round(report.elapsedTime, 6))

        for sim in floats:
            body = sim.body
            output = report.outputs.get(body.name)

            frameFloats[body.name] = {
                'position': np.round(body.position, 6).tolist(),
                'velocity': np.round(body.velocity, 6).tolist(),
                'force': np.round(body.force, 6).tolist(),
                'damping': round(body.linearDamping, 6),
                'regime': output.regime.value if output is not None else None,
            }

            series = self._history.setdefault(
                body.name, {'centerY': [], 'waterHeight': [], 'submergedFraction': []}
            )
            series['centerY'].append(round(body.centerY, 6))
            if output is not None:
                series['waterHeight'].append(round(output.waterHeight, 6))
                series['submergedFraction'].append(
                    round(output.displacedVolume / fullVolume(body.radius), 6)
                )
            else:
                series['waterHeight'].append(None)
                series['submergedFraction'].append(None)

        self._frames.append({
            'time': round(report.elapsedTime, 6),
            'floats': frameFloats,
        })

    def export(
        self,
        config: SimulationConfig,
        outputDir: str = 'FloatSim/output',
        scenarioName: str = 'buoyDrop',
    ) -> str:
        '''
        Write all collected frames to a JSON file.

        Parameters:
        -----------
        config : SimulationConfig
            Simulation configuration for metadata
        outputDir : str
            Output directory path
        scenarioName : str
            Scenario name for the filename

        Returns:
        --------
        str : Path to the exported JSON file
        '''
        os.makedirs(outputDir, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename = f'floatSim_{scenarioName}_{timestamp}.json'
        filepath = os.path.join(outputDir, filename)

        output = {
            'meta': {
                'type': 'floatSim',
                'nFrames': len(self._frames),
                'nFloats': len(self._frames[0]['floats']) if self._frames else 0,
                'timeStep': config.timeStep,
                'created': datetime.now().isoformat(),
            },
            'config': config.toDict(),
            'frames': self._frames,
            'history': self._history,
        }

        with open(filepath, 'w') as f:
            json.dump(output, f, indent=None, separators=(',', ':'))

        return filepath
