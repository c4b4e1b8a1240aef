# -- Sphere Submersion Geometry -- #

'''
Geometry of a sphere cut by a horizontal water plane.

The displaced volume is piecewise: zero above the surface, the full
sphere below it, and a spherical cap in between. The cap height is
waterHeight - centerY + radius, which is 0 at the upper boundary and
2r at the lower one, so all three branches agree where they meet.

Key equations:
- Sphere volume: V = (4/3) * pi * r^3
- Spherical cap: V_cap = (pi/3) * (3 * h^2 * r - h^3), 0 <= h <= 2r
- Cross-section at offset d from center: A = pi * (r^2 - d^2), |d| < r

References:
-----------
Spherical cap: https://en.wikipedia.org/wiki/Spherical_cap
Buoyancy calculator: https://www.omnicalculator.com/physics/buoyancy
'''

from __future__ import annotations

import math

from FloatSim.buoyancy.protocols import InvalidFloatBodyError


def validateRadius(radius: float) -> None:
    '''Reject non-positive or non-finite sphere radii.'''
    if not math.isfinite(radius) or radius <= 0.0:
        raise InvalidFloatBodyError(f'Sphere radius must be positive and finite, got {radius!r}')


######################################################################
# -- Volumes -- #
######################################################################

def fullVolume(radius: float) -> float:
    '''Volume of a full sphere [m^3].'''
    validateRadius(radius)
    return 4.0 / 3.0 * math.pi * radius ** 3


def capVolume(radius: float, capHeight: float) -> float:
    '''
    Volume of a spherical cap cut from a sphere.

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    capHeight : float
        Height of the cap [m], in [0, 2 * radius]

    Returns:
    --------
    float : Cap volume [m^3]
    '''
    validateRadius(radius)
    if capHeight < 0.0 or capHeight > 2.0 * radius:
        raise ValueError(f'Cap height {capHeight} outside [0, {2.0 * radius}]')
    return math.pi / 3.0 * (3.0 * capHeight ** 2 * radius - capHeight ** 3)


def displacedVolume(radius: float, centerY: float, waterHeight: float) -> float:
    '''
    Volume of liquid displaced by a sphere at a given height.

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    centerY : float
        Vertical position of the sphere center [m]
    waterHeight : float
        Local water surface height [m]

    Returns:
    --------
    float : Displaced volume [m^3], in [0, fullVolume(radius)]
    '''
    validateRadius(radius)

    # Above surface
    if centerY >= waterHeight + radius:
        return 0.0

    # Fully submerged
    if centerY <= waterHeight - radius:
        return fullVolume(radius)

    # Partially submerged: height of the cap below the surface
    capHeight = min(max(waterHeight - centerY + radius, 0.0), 2.0 * radius)
    return capVolume(radius, capHeight)


def submergedFraction(radius: float, centerY: float, waterHeight: float) -> float:
    '''Fraction of the sphere volume below the surface, in [0, 1].'''
    return displacedVolume(radius, centerY, waterHeight) / fullVolume(radius)


######################################################################
# -- Cross-Section Areas -- #
######################################################################

def crossSectionArea(radius: float) -> float:
    '''Equatorial (maximal) cross-section area of a sphere [m^2].'''
    validateRadius(radius)
    return math.pi * radius ** 2


def offCenterCrossSectionArea(radius: float, distanceFromCenter: float) -> float:
    '''
    Area of the disc where a plane cuts the sphere.

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    distanceFromCenter : float
        Signed distance from the sphere center to the plane [m];
        only its magnitude matters

    Returns:
    --------
    float : Disc area [m^2], 0 if the plane misses the sphere
    '''
    validateRadius(radius)
    distance = abs(distanceFromCenter)
    if distance >= radius:
        return 0.0

    return math.pi * (radius ** 2 - distance ** 2)
