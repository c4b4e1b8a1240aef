# -- Per-Tick Float Update -- #

'''
Per-tick update of float force and damping outputs.

Called by the host once per fixed step, after body transforms and
velocities are current and before the host integrates forces. Each body
is evaluated on its own state and the shared constants only, so one
body's bad input never affects another.

Outputs are overwritten every tick. Nothing accumulates across ticks.
'''

from __future__ import annotations

from collections import Counter
from typing import Iterable

import numpy as np

from FloatSim.buoyancy.buoyancyForce import BuoyancyModel
from FloatSim.buoyancy.damping import DampingModel, classifyRegime
from FloatSim.buoyancy.protocols import (
    FloatBody,
    FloatOutput,
    InvalidFloatBodyError,
    NonSphericalShapeError,
    PhysicsConfig,
    SurfaceModel,
    TickReport,
)
from FloatSim.buoyancy.submersion import displacedVolume, validateRadius
from FloatSim.buoyancy.waterSurface import TravelingSineWave


def validateKinematics(body: FloatBody) -> None:
    '''Reject position or velocity vectors that are not finite 3-vectors.'''
    for label, vector in (('position', body.position), ('velocity', body.velocity)):
        if np.shape(vector) != (3,):
            raise InvalidFloatBodyError(
                f'Float {body.name!r} {label} must have shape (3,), got {np.shape(vector)}'
            )
        if not np.isfinite(vector).all():
            raise InvalidFloatBodyError(
                f'Float {body.name!r} {label} must be finite, got {vector}'
            )


def computeFloatOutput(
    body: FloatBody,
    elapsedTime: float,
    surface: SurfaceModel,
    buoyancy: BuoyancyModel,
    damping: DampingModel,
) -> FloatOutput:
    '''
    Evaluate force and damping for one float without touching it.

    Parameters:
    -----------
    body : FloatBody
        Float state (position, velocity, radius)
    elapsedTime : float
        Simulated time [s]
    surface : SurfaceModel
        Water surface height model
    buoyancy : BuoyancyModel
        Buoyant force model
    damping : DampingModel
        Damping coefficient model

    Returns:
    --------
    FloatOutput : Derived force and damping

    Raises:
    -------
    NonSphericalShapeError : body shape is not a sphere
    InvalidFloatBodyError : radius is not positive and finite, or
        position or velocity is not a finite 3-vector
    '''
    if body.shape != 'sphere':
        raise NonSphericalShapeError(
            f'Float {body.name!r} has shape {body.shape!r}; only spheres are supported'
        )
    validateRadius(body.radius)
    validateKinematics(body)

    x = float(body.position[0])
    centerY = body.centerY
    waterHeight = surface.height(elapsedTime, x)

    volume = displacedVolume(body.radius, centerY, waterHeight)
    coefficient = damping.dampingCoefficient(body.radius, centerY, waterHeight, body.velocity)

    return FloatOutput(
        force=buoyancy.buoyantForce(volume),
        damping=coefficient,
        displacedVolume=volume,
        waterHeight=waterHeight,
        regime=classifyRegime(body.radius, centerY, waterHeight),
    )


def applyFloatOutput(body: FloatBody, output: FloatOutput) -> None:
    '''Overwrite a body's force and damping outputs.'''
    body.force = output.force.copy()
    body.linearDamping = output.damping
    body.angularDamping = output.damping


class FloatUpdater:
    '''
    Applies the buoyancy and damping model to a collection of floats.

    Usage:
        updater = FloatUpdater(PhysicsConfig(), TravelingSineWave())
        # Each host step:
        report = updater.update(bodies, elapsedTime)
    '''

    def __init__(
        self,
        config: PhysicsConfig | None = None,
        surface: SurfaceModel | None = None,
    ) -> None:
        self._config = config if config is not None else PhysicsConfig()
        self._surface = surface if surface is not None else TravelingSineWave()
        self._buoyancy = BuoyancyModel(self._config)
        self._damping = DampingModel(self._config)

    @property
    def surface(self) -> SurfaceModel:
        return self._surface

    @property
    def buoyancy(self) -> BuoyancyModel:
        return self._buoyancy

    def update(self, bodies: Iterable[FloatBody], elapsedTime: float) -> TickReport:
        '''
        Update every float for one tick.

        Rejected bodies keep their previous outputs and are listed in
        the report's failures. Report entries are keyed by body name,
        so names must be unique within one call.

        Parameters:
        -----------
        bodies : Iterable[FloatBody]
            Floats to update
        elapsedTime : float
            Simulated time shared by all bodies [s]

        Returns:
        --------
        TickReport : Per-body outputs and failures

        Raises:
        -------
        ValueError : two bodies share a name (no body is updated)
        '''
        bodies = list(bodies)
        duplicates = sorted(name for name, count in Counter(b.name for b in bodies).items() if count > 1)
        if duplicates:
            raise ValueError(f'Float names must be unique per tick, duplicated: {duplicates}')

        report = TickReport(elapsedTime=elapsedTime)

        for body in bodies:
            try:
                output = computeFloatOutput(
                    body, elapsedTime, self._surface, self._buoyancy, self._damping
                )
            except InvalidFloatBodyError as e:
                report.failures[body.name] = str(e)
                continue

            applyFloatOutput(body, output)
            report.outputs[body.name] = output

        return report


def updateFloats(
    bodies: Iterable[FloatBody],
    elapsedTime: float,
    config: PhysicsConfig | None = None,
    surface: SurfaceModel | None = None,
) -> TickReport:
    '''Update a collection of floats for one tick with a one-off updater.'''
    return FloatUpdater(config, surface).update(bodies, elapsedTime)
