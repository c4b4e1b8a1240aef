# -- Submersion Damping Test -- #

'''
Tests for regime classification and the quadratic drag damping law.
'''

import math

import numpy as np
import pytest

from FloatSim.buoyancy.damping import (
    DampingModel,
    classifyRegime,
    dragDamping,
    referenceArea,
    submergedOffset,
)
from FloatSim.buoyancy.protocols import InvalidFloatBodyError, PhysicsConfig, SubmersionRegime
from FloatSim.buoyancy.submersion import crossSectionArea, offCenterCrossSectionArea


def testQuadraticScaling():
    '''Doubling the speed quadruples the damping.'''
    base = dragDamping(1.3, 0.4, 0.47, 1.025)
    assert dragDamping(2.6, 0.4, 0.47, 1.025) == pytest.approx(4.0 * base)


def testDragDampingFormula():
    assert dragDamping(2.0, 0.5, 0.47, 1.025) == pytest.approx(0.5 * 1.025 * 4.0 * 0.5 * 0.47)


def testHalfSubmergedBoundary():
    '''r = 0.5 at y = h: offset is exactly -r, the PARTIAL/DEEP boundary.'''
    assert submergedOffset(0.5, 0.0, 0.0) == -0.5
    assert classifyRegime(0.5, 0.0, 0.0) is SubmersionRegime.PARTIAL
    assert referenceArea(0.5, 0.0, 0.0) == pytest.approx(crossSectionArea(0.5))


def testDryHasNoDamping():
    model = DampingModel()
    velocity = np.array([1.0, -3.0, 0.5])

    assert classifyRegime(0.5, 5.0, 0.0) is SubmersionRegime.DRY
    assert model.dampingCoefficient(0.5, 5.0, 0.0, velocity) == 0.0


def testTouchingSurfaceIsDry():
    '''Bottom exactly on the surface still counts as dry.'''
    assert classifyRegime(0.5, 0.5, 0.0) is SubmersionRegime.DRY


def testDeepUsesEquatorialArea():
    config = PhysicsConfig()
    model = DampingModel(config)
    velocity = np.array([0.0, 2.0, 0.0])

    assert classifyRegime(0.5, -5.0, 0.0) is SubmersionRegime.DEEP
    assert referenceArea(0.5, -5.0, 0.0) == pytest.approx(math.pi * 0.25)

    expected = 0.5 * config.liquidDensity * 4.0 * math.pi * 0.25 * config.dragCoefficient
    assert model.dampingCoefficient(0.5, -5.0, 0.0, velocity) == pytest.approx(expected)


def testPartialUsesOffCenterArea():
    '''r = 1, y = 0.8: the water plane is 0.8 below the center.'''
    assert classifyRegime(1.0, 0.8, 0.0) is SubmersionRegime.PARTIAL
    assert referenceArea(1.0, 0.8, 0.0) == pytest.approx(offCenterCrossSectionArea(1.0, 0.8))
    assert referenceArea(1.0, 0.8, 0.0) == pytest.approx(math.pi * 0.36)


def testDampingContinuousAcrossRegimes():
    '''Damping varies continuously as a sphere sinks through the surface.'''
    model = DampingModel()
    velocity = np.array([0.0, -1.0, 0.0])
    ys = np.linspace(-1.5, 1.5, 3001)
    values = np.array([model.dampingCoefficient(1.0, y, 0.0, velocity) for y in ys])

    assert np.all(values >= 0.0)
    assert np.max(np.abs(np.diff(values))) < 1e-2


def testDampingUsesSpeedMagnitude():
    model = DampingModel()
    a = model.dampingCoefficient(0.5, -2.0, 0.0, np.array([3.0, 0.0, 4.0]))
    b = model.dampingCoefficient(0.5, -2.0, 0.0, np.array([0.0, -5.0, 0.0]))
    assert a == pytest.approx(b)


def testInvalidRadiusFailsFast():
    with pytest.raises(InvalidFloatBodyError):
        DampingModel().dampingCoefficient(-1.0, 0.0, 0.0, np.zeros(3))
