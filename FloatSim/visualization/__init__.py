# -- Visualization Subpackage -- #

'''
Plotly figures for float trajectories, forces, and the damping law.
'''

from FloatSim.visualization.trajectoryPlots import (
    plotFloatHeights,
    plotSubmergedFraction,
    plotDampingCurve,
)
