# -- Water Surface Models -- #

'''
Water surface height as a function of time and horizontal position.

TravelingSineWave with default parameters reproduces the surface the
float demo was built around, eta = sin(t + x). The wave varies along x
only; the z coordinate is ignored, so wave crests run parallel to the
z axis. This one-axis pattern is kept on purpose.
'''

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from FloatSim.buoyancy.protocols import SurfaceModel


@dataclass
class TravelingSineWave:
    '''
    Sinusoidal traveling wave along the x axis.

    eta(t, x) = amplitude * sin(angularFrequency * t + wavenumber * x)

    Parameters:
    -----------
    amplitude : float
        Wave amplitude [m]
    angularFrequency : float
        Angular frequency omega [rad/s]
    wavenumber : float
        Wavenumber k [rad/m]
    '''

    amplitude: float = 1.0
    angularFrequency: float = 1.0
    wavenumber: float = 1.0

    def height(self, elapsedTime: float, horizontalX: float) -> float:
        '''Surface height [m] at x and time t.'''
        phase = self.angularFrequency * elapsedTime + self.wavenumber * horizontalX
        return self.amplitude * math.sin(phase)


@dataclass
class StillWater:
    '''Flat, motionless water surface at a fixed level.'''

    level: float = 0.0

    def height(self, elapsedTime: float, horizontalX: float) -> float:
        '''Surface height [m]; independent of time and position.'''
        return self.level


def sampleHeights(
    surface: SurfaceModel, elapsedTime: float, xs: np.ndarray
) -> np.ndarray:
    '''
    Sample a surface model over an array of x positions.

    Parameters:
    -----------
    surface : SurfaceModel
        Any model with a height(elapsedTime, horizontalX) method
    elapsedTime : float
        Simulated time [s]
    xs : np.ndarray
        Horizontal positions [m]

    Returns:
    --------
    np.ndarray : Surface heights [m], same shape as xs
    '''
    xs = np.asarray(xs, dtype=float)
    return np.array([surface.height(elapsedTime, float(x)) for x in xs.ravel()]).reshape(xs.shape)
