# -- Submersion Geometry Test -- #

'''
Tests for sphere volumes, displaced volume, and cross-section areas.
'''

import math

import numpy as np
import pytest

from FloatSim.buoyancy.protocols import InvalidFloatBodyError
from FloatSim.buoyancy.submersion import (
    capVolume,
    crossSectionArea,
    displacedVolume,
    fullVolume,
    offCenterCrossSectionArea,
    submergedFraction,
)


@pytest.mark.parametrize('radius', [0.1, 0.5, 1.0, 3.7])
def testFullVolume(radius):
    '''Sphere volume is 4/3 pi r^3.'''
    assert fullVolume(radius) == pytest.approx(4.0 / 3.0 * math.pi * radius ** 3)


def testHalfCapIsHalfSphere():
    '''A cap of height r is exactly half the sphere.'''
    assert capVolume(0.5, 0.5) == pytest.approx(0.5 * fullVolume(0.5))
    assert capVolume(0.5, 0.5) == pytest.approx(0.2618, abs=1e-4)


def testFullCapIsWholeSphere():
    assert capVolume(1.0, 2.0) == pytest.approx(fullVolume(1.0))
    assert capVolume(1.0, 0.0) == 0.0


def testCapHeightOutOfRange():
    with pytest.raises(ValueError):
        capVolume(1.0, 2.5)
    with pytest.raises(ValueError):
        capVolume(1.0, -0.1)


def testDisplacedVolumeDry():
    '''Sphere well above the surface displaces nothing.'''
    assert displacedVolume(0.5, 5.0, 0.0) == 0.0


def testDisplacedVolumeFullySubmerged():
    assert displacedVolume(0.5, -5.0, 0.0) == fullVolume(0.5)


def testDisplacedVolumeContinuousAtBoundaries():
    '''All three branches agree at y = h + r and y = h - r.'''
    r, h = 0.7, 0.3
    eps = 1e-9

    assert displacedVolume(r, h + r, h) == 0.0
    assert displacedVolume(r, h + r - eps, h) == pytest.approx(0.0, abs=1e-12)

    assert displacedVolume(r, h - r, h) == pytest.approx(fullVolume(r))
    assert displacedVolume(r, h - r + eps, h) == pytest.approx(fullVolume(r), rel=1e-9)


def testDisplacedVolumeMonotonic():
    '''Displaced volume never increases as the sphere rises.'''
    r, h = 1.0, -0.4
    ys = np.linspace(h - 3.0 * r, h + 3.0 * r, 601)
    volumes = np.array([displacedVolume(r, y, h) for y in ys])

    assert np.all(np.diff(volumes) <= 1e-12)
    assert np.all(volumes >= 0.0)
    assert np.all(volumes <= fullVolume(r) + 1e-12)


def testDisplacedVolumePartialShallow():
    '''r = 1, y = 0.8: a thin cap of height 0.2 is under water.'''
    volume = displacedVolume(1.0, 0.8, 0.0)

    assert 0.0 < volume < fullVolume(1.0)
    assert volume == pytest.approx(math.pi / 3.0 * (3.0 * 0.2 ** 2 - 0.2 ** 3))


def testSubmergedFraction():
    assert submergedFraction(0.5, 0.0, 0.0) == pytest.approx(0.5)
    assert submergedFraction(0.5, 2.0, 0.0) == 0.0
    assert submergedFraction(0.5, -2.0, 0.0) == pytest.approx(1.0)


def testCrossSectionArea():
    assert crossSectionArea(0.5) == pytest.approx(math.pi * 0.25)


def testOffCenterCrossSectionArea():
    '''Zero outside the sphere, maximal through the center.'''
    r = 0.8

    assert offCenterCrossSectionArea(r, 0.0) == pytest.approx(math.pi * r ** 2)
    assert offCenterCrossSectionArea(r, r) == 0.0
    assert offCenterCrossSectionArea(r, -r) == 0.0
    assert offCenterCrossSectionArea(r, 2.0 * r) == 0.0
    assert offCenterCrossSectionArea(r, 0.3) == pytest.approx(math.pi * (r ** 2 - 0.09))
    assert offCenterCrossSectionArea(r, -0.3) == offCenterCrossSectionArea(r, 0.3)


@pytest.mark.parametrize('radius', [0.0, -0.5, float('nan'), float('inf')])
def testInvalidRadiusRejected(radius):
    '''Degenerate radii fail fast instead of producing NaN or negative areas.'''
    with pytest.raises(InvalidFloatBodyError):
        fullVolume(radius)
    with pytest.raises(InvalidFloatBodyError):
        displacedVolume(radius, 0.0, 0.0)
    with pytest.raises(InvalidFloatBodyError):
        offCenterCrossSectionArea(radius, 0.0)
