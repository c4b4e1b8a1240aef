# -- Water Surface Test -- #

'''
Tests for the traveling sine wave and still water surfaces.
'''

import math

import numpy as np
import pytest

from FloatSim.buoyancy.waterSurface import StillWater, TravelingSineWave, sampleHeights


def testDefaultWaveIsSinOfTimePlusX():
    wave = TravelingSineWave()
    for t, x in [(0.0, 0.0), (1.3, -0.4), (10.0, 2.5), (-3.0, 7.0)]:
        assert wave.height(t, x) == pytest.approx(math.sin(t + x))


def testWaveParameters():
    wave = TravelingSineWave(amplitude=0.25, angularFrequency=2.0, wavenumber=0.5)
    assert wave.height(1.0, 2.0) == pytest.approx(0.25 * math.sin(2.0 + 1.0))


def testWaveIsDeterministic():
    wave = TravelingSineWave()
    assert wave.height(4.2, 1.1) == wave.height(4.2, 1.1)


def testStillWater():
    water = StillWater(level=-0.3)
    assert water.height(0.0, 0.0) == -0.3
    assert water.height(99.0, -12.0) == -0.3


def testSampleHeights():
    xs = np.linspace(-1.0, 1.0, 5)
    heights = sampleHeights(TravelingSineWave(), 0.5, xs)

    assert heights.shape == xs.shape
    assert np.allclose(heights, np.sin(0.5 + xs))
