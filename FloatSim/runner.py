# -- Float Simulation Runner -- #

'''
Command-line entry point for running float buoyancy simulations.

Builds the buoy drop scenario, steps the host stand-in integrator with
the buoyancy model applied every tick, reports progress, and optionally
exports frame data and Plotly figures.

Usage:
    python -m FloatSim                              # Four raft buoys on the traveling wave
    python -m FloatSim --preset single              # One buoy in still water
    python -m FloatSim --config configs/buoy_drop_default.json
    python -m FloatSim --no-export --plot           # Skip JSON, write HTML plots
'''

from __future__ import annotations

import argparse
import os
import time as timeModule

from FloatSim.buoyancy.tickUpdate import FloatUpdater
from FloatSim.export.frameExporter import FrameExporter
from FloatSim.scenarios.buoyDrop import createBuoyDrop
from FloatSim.scenarios.config import PRESETS, SURFACES, SimulationConfig
from FloatSim.scenarios.hostIntegrator import SemiImplicitEuler
from FloatSim.visualization.trajectoryPlots import (
    plotDampingCurve,
    plotFloatHeights,
    plotSubmergedFraction,
)


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='FloatSim -- spherical float buoyancy simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to JSON configuration file',
    )
    parser.add_argument(
        '--preset', type=str, default=None,
        choices=list(PRESETS),
        help='Float layout preset (default: raft, or the config file preset)',
    )
    parser.add_argument(
        '--surface', type=str, default=None,
        choices=list(SURFACES),
        help='Override the water surface model',
    )
    parser.add_argument(
        '--end-time', type=float, default=None,
        help='Override simulation end time [s]',
    )
    parser.add_argument(
        '--dt', type=float, default=None,
        help='Override fixed time step [s]',
    )
    parser.add_argument(
        '--no-export', action='store_true',
        help='Skip frame data export',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Write Plotly HTML figures to the output directory',
    )
    parser.add_argument(
        '--output-dir', type=str, default='FloatSim/output',
        help='Output directory for exported frames and plots (default: FloatSim/output)',
    )

    return parser


def loadConfig(args: argparse.Namespace) -> SimulationConfig:
    '''Resolve the run configuration from CLI arguments.'''
    if args.config:
        config = SimulationConfig.fromJson(args.config)
    elif args.preset == 'single':
        config = SimulationConfig.singleBuoy()
    else:
        config = SimulationConfig.raft()

    overrides = config.toDict()
    if args.config and args.preset is not None:
        overrides['simulation']['preset'] = args.preset
    if args.surface is not None:
        overrides['simulation']['surface'] = args.surface
    if args.end_time is not None:
        overrides['simulation']['endTime'] = args.end_time
    if args.dt is not None:
        overrides['simulation']['timeStep'] = args.dt

    return SimulationConfig.fromDict(overrides)


#--------------------------------------------------------------------#
# -- Runner Class -- #
#--------------------------------------------------------------------#

class FloatSimRunner:
    '''
    Runs a float simulation and stores results.

    Handles the full pipeline: scenario setup, fixed-step loop with
    the buoyancy model applied every tick, progress reporting, and
    optional export.
    '''

    def __init__(self, verbose: bool = True) -> None:
        self._exporter: FrameExporter = FrameExporter()
        self._verbose = verbose

    @property
    def exporter(self) -> FrameExporter:
        return self._exporter

    def _print(self, text: str = '') -> None:
        if self._verbose:
            print(text)

    def run(
        self,
        config: SimulationConfig,
        doExport: bool = True,
        doPlot: bool = False,
        exportDir: str = 'FloatSim/output',
    ) -> dict:
        '''
        Run a buoy drop simulation.

        Parameters:
        -----------
        config : SimulationConfig
            Run configuration
        doExport : bool
            Whether to export frame data
        doPlot : bool
            Whether to write Plotly HTML figures
        exportDir : str
            Output directory for export and plots

        Returns:
        --------
        dict : Simulation results summary
        '''
        self._print()
        self._print('=' * 62)
        self._print('  FLOATSIM -- BUOY DROP SIMULATION')
        self._print('=' * 62)
        self._print()

        #--------------------------------------------------------------------#
        # Scenario Setup
        #--------------------------------------------------------------------#
        self._print('-' * 62)
        self._print('  SCENARIO SETUP')
        self._print('-' * 62)

        floats = createBuoyDrop(config)
        bodies = [sim.body for sim in floats]
        updater = FloatUpdater(config.physics, config.buildSurface())
        integrator = SemiImplicitEuler(config.physics.gravity)

        self._print(f'  Preset:            {config.preset:>8}')
        self._print(f'  Surface:           {config.surface:>8}')
        self._print(f'  Floats:            {len(floats):8d}')
        self._print(f'  Float Radius:      {config.floatRadius:8.3f} m')
        self._print(f'  Float Mass:        {floats[0].massKg:8.4f}')
        self._print(f'  Liquid Density:    {config.physics.liquidDensity:8.3f}')
        self._print(f'  Drag Coefficient:  {config.physics.dragCoefficient:8.3f}')
        self._print(f'  Time Step:         {config.timeStep:8.4f} s')
        self._print(f'  End Time:          {config.endTime:8.2f} s')
        self._print()

        #--------------------------------------------------------------------#
        # Simulation Loop
        #--------------------------------------------------------------------#
        self._print('-' * 62)
        self._print('  RUNNING SIMULATION')
        self._print('-' * 62)
        self._print()
        self._print(f'  {"Time":>8}  {"Step":>6}  {"MeanY":>8}  {"MeanFy":>8}  {"MeanDamp":>9}  {"Wet":>4}')
        self._print(f'  {"(s)":>8}  {"":>6}  {"(m)":>8}  {"(N)":>8}  {"":>9}  {"":>4}')
        self._print('  ' + '-' * 52)

        wallClockStart = timeModule.time()
        printInterval = max(0.5, config.endTime / 20.0)
        nextPrintTime = 0.0
        nextOutputTime = 0.0
        reportedFailures: dict[str, str] = {}

        elapsedTime = 0.0
        for step in range(config.nSteps):
            report = updater.update(bodies, elapsedTime)

            for name, message in report.failures.items():
                if name not in reportedFailures:
                    self._print(f'  WARNING: {name} rejected: {message}')
                    reportedFailures[name] = message

            if elapsedTime >= nextOutputTime - 1e-9:
                self._exporter.addFrame(report, floats)
                nextOutputTime += config.outputInterval

            if elapsedTime >= nextPrintTime - 1e-9:
                nWet = sum(1 for out in report.outputs.values() if out.displacedVolume > 0.0)
                n = max(1, len(bodies))
                self._print(
                    f'  {elapsedTime:8.3f}  {step:6d}  '
                    f'{sum(b.centerY for b in bodies) / n:8.4f}  '
                    f'{sum(float(b.force[1]) for b in bodies) / n:8.4f}  '
                    f'{sum(b.linearDamping for b in bodies) / n:9.4f}  '
                    f'{nWet:4d}'
                )
                nextPrintTime += printInterval

            integrator.integrate(floats, config.timeStep)
            elapsedTime += config.timeStep

        # Final state after the last integration step
        finalReport = updater.update(bodies, elapsedTime)
        self._exporter.addFrame(finalReport, floats)

        wallClockSeconds = timeModule.time() - wallClockStart

        self._print()
        self._print('  Simulation complete.')
        self._print(f'  Total steps:       {config.nSteps:8d}')
        self._print(f'  Wall-clock time:   {wallClockSeconds:8.2f} s')
        self._print(f'  Frames recorded:   {self._exporter.nFrames:8d}')
        self._print()

        #--------------------------------------------------------------------#
        # Export
        #--------------------------------------------------------------------#
        exportPath = None
        if doExport:
            self._print('-' * 62)
            self._print('  EXPORTING FRAME DATA')
            self._print('-' * 62)

            exportPath = self._exporter.export(
                config=config,
                outputDir=exportDir,
                scenarioName=config.preset,
            )
            self._print(f'  Exported to: {exportPath}')
            self._print()

        plotPaths = []
        if doPlot:
            plotPaths = self._writePlots(config, exportDir)

        #--------------------------------------------------------------------#
        # Summary
        #--------------------------------------------------------------------#
        self._print('=' * 62)
        self._print('  SIMULATION SUMMARY')
        self._print('=' * 62)
        self._print(f'  {"Float":<8}  {"FinalY":>8}  {"Water":>8}  {"Regime":>8}  {"RestY":>8}')
        for sim in floats:
            body = sim.body
            output = finalReport.outputs.get(body.name)
            if output is None:
                self._print(f'  {body.name:<8}  {"rejected":>8}')
                continue
            restY = updater.buoyancy.findEquilibriumCenterY(body.radius, sim.massKg, 0.0)
            self._print(
                f'  {body.name:<8}  {body.centerY:8.4f}  {output.waterHeight:8.4f}  '
                f'{output.regime.value:>8}  {restY:8.4f}'
            )
        self._print('  (RestY: still-water equilibrium center height)')
        self._print('=' * 62)
        self._print()

        return {
            'finalReport': finalReport,
            'floats': floats,
            'history': self._exporter.history,
            'failures': reportedFailures,
            'wallClockSeconds': wallClockSeconds,
            'nFrames': self._exporter.nFrames,
            'exportPath': exportPath,
            'plotPaths': plotPaths,
        }

    def _writePlots(self, config: SimulationConfig, outputDir: str) -> list[str]:
        '''Write trajectory and damping figures as HTML files.'''
        self._print('-' * 62)
        self._print('  WRITING PLOTS')
        self._print('-' * 62)

        os.makedirs(outputDir, exist_ok=True)
        history = self._exporter.history

        figures = {
            'heights': plotFloatHeights(history),
            'submerged': plotSubmergedFraction(history),
            'damping': plotDampingCurve(config.floatRadius, 1.0, config.physics),
        }

        paths = []
        for name, fig in figures.items():
            path = os.path.join(outputDir, f'floatSim_{config.preset}_{name}.html')
            fig.write_html(path)
            paths.append(path)
            self._print(f'  Wrote: {path}')
        self._print()

        return paths


#--------------------------------------------------------------------#
# -- CLI Entry Point -- #
#--------------------------------------------------------------------#

def main() -> None:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args()

    config = loadConfig(args)

    runner = FloatSimRunner()
    runner.run(
        config,
        doExport=not args.no_export,
        doPlot=args.plot,
        exportDir=args.output_dir,
    )


if __name__ == '__main__':
    main()
