# -- Float Simulation Runner Test -- #

'''
Integration tests for the runner, frame export, and plots.
'''

import json
import os

import numpy as np
import plotly.graph_objects as go

from FloatSim.runner import FloatSimRunner, buildParser, loadConfig
from FloatSim.scenarios.config import SimulationConfig
from FloatSim.visualization.trajectoryPlots import (
    plotDampingCurve,
    plotFloatHeights,
    plotSubmergedFraction,
)


def testRunSingleBuoyStillWater():
    config = SimulationConfig.fromDict({
        'simulation': {'preset': 'single', 'surface': 'still', 'endTime': 2.0},
    })
    results = FloatSimRunner(verbose=False).run(config, doExport=False)

    assert results['exportPath'] is None
    assert results['failures'] == {}
    assert len(results['floats']) == 1
    assert results['nFrames'] == len(results['history']['times'])
    assert len(results['history']['buoy0']['centerY']) == results['nFrames']


def testRunRaftOnWaveExports(tmp_path):
    config = SimulationConfig.fromDict({
        'simulation': {'preset': 'raft', 'surface': 'wave', 'endTime': 1.0, 'outputInterval': 0.25},
    })
    results = FloatSimRunner(verbose=False).run(config, exportDir=str(tmp_path))

    with open(results['exportPath'], 'r') as f:
        data = json.load(f)

    assert data['meta']['type'] == 'floatSim'
    assert data['meta']['nFloats'] == 4
    assert data['config']['simulation']['preset'] == 'raft'
    assert set(data['frames'][0]['floats']) == {'buoy0', 'buoy1', 'buoy2', 'buoy3'}
    assert all(
        np.all(np.isfinite(sim.body.position)) for sim in results['floats']
    )


def testRunWritesPlots(tmp_path):
    config = SimulationConfig.fromDict({'simulation': {'preset': 'single', 'endTime': 0.5}})
    results = FloatSimRunner(verbose=False).run(
        config, doExport=False, doPlot=True, exportDir=str(tmp_path)
    )

    assert len(results['plotPaths']) == 3
    for path in results['plotPaths']:
        assert os.path.exists(path)


def testCliOverrides():
    args = buildParser().parse_args(['--preset', 'single', '--surface', 'wave', '--end-time', '3', '--dt', '0.01'])
    config = loadConfig(args)

    assert config.preset == 'single'
    assert config.surface == 'wave'
    assert config.endTime == 3.0
    assert config.timeStep == 0.01


def testCliPresetAppliesOverConfigFile(tmp_path):
    configPath = tmp_path / 'raft.json'
    configPath.write_text(json.dumps({'simulation': {'preset': 'raft', 'endTime': 2.0}}))

    fromFile = loadConfig(buildParser().parse_args(['--config', str(configPath)]))
    overridden = loadConfig(buildParser().parse_args(['--config', str(configPath), '--preset', 'single']))

    assert fromFile.preset == 'raft'
    assert overridden.preset == 'single'
    assert overridden.endTime == 2.0
    assert loadConfig(buildParser().parse_args([])).preset == 'raft'


def testPlotBuilders():
    history = {
        'times': [0.0, 0.1, 0.2],
        'buoy0': {'centerY': [1.0, 0.9, 0.8], 'waterHeight': [0.0, 0.1, 0.2], 'submergedFraction': [0.0, 0.0, 0.05]},
    }

    assert isinstance(plotFloatHeights(history), go.Figure)
    assert len(plotFloatHeights(history).data) == 2
    assert len(plotSubmergedFraction(history).data) == 1

    fig = plotDampingCurve(0.5, speed=2.0)
    assert len(fig.data) == 2
    assert min(fig.data[0].y) >= 0.0
