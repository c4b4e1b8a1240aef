# -- Visualization Theme -- #

'''
Shared colors and template for the FloatSim Plotly figures.
'''

TEMPLATE = 'plotly_dark'

# Per-buoy series, cycled in buoy order
PALETTE = ['#42A5F5', '#EF5350', '#66BB6A', '#AB47BC']

# Damping coefficient trace
DAMPING = '#FFA726'

# Water surface and submerged fraction traces
WATER = '#26C6DA'

# Regime boundaries and reference levels
REFERENCE_LINE = '#888888'
