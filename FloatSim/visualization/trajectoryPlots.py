# -- Float Trajectory Visualizations -- #

'''
Plotly-based interactive plots for float simulation results.
'''

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from FloatSim.buoyancy.damping import DampingModel
from FloatSim.buoyancy.protocols import PhysicsConfig
from FloatSim.buoyancy.submersion import submergedFraction
from FloatSim.visualization import theme


def _buoyNames(history: dict) -> list[str]:
    return [name for name in history if name != 'times']


def plotFloatHeights(history: dict) -> go.Figure:
    '''
    Buoy center height and local water height vs time.

    Parameters:
    -----------
    history : dict
        FrameExporter history ('times' plus one series dict per buoy)

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    times = history['times']
    fig = go.Figure()

    for i, name in enumerate(_buoyNames(history)):
        color = theme.PALETTE[i % len(theme.PALETTE)]
        series = history[name]

        fig.add_trace(go.Scatter(
            x=times, y=series['centerY'],
            mode='lines', name=f'{name} center',
            line=dict(color=color, width=2),
        ))
        fig.add_trace(go.Scatter(
            x=times, y=series['waterHeight'],
            mode='lines', name=f'{name} water',
            line=dict(color=color, width=1, dash='dot'),
        ))

    fig.update_layout(
        title='Float Height vs Local Water Height',
        xaxis_title='Time (s)',
        yaxis_title='Height (m)',
        template=theme.TEMPLATE,
        height=450,
    )

    return fig


def plotSubmergedFraction(history: dict) -> go.Figure:
    '''Submerged volume fraction of each buoy vs time.'''
    times = history['times']
    fig = go.Figure()

    for i, name in enumerate(_buoyNames(history)):
        fig.add_trace(go.Scatter(
            x=times, y=history[name]['submergedFraction'],
            mode='lines', name=name,
            line=dict(color=theme.PALETTE[i % len(theme.PALETTE)]),
        ))

    fig.add_hline(y=0.5, line_dash='dash', line_color=theme.REFERENCE_LINE,
                  annotation_text='half submerged')

    fig.update_layout(
        title='Submerged Fraction',
        xaxis_title='Time (s)',
        yaxis_title='V_sub / V',
        yaxis_range=[0.0, 1.05],
        template=theme.TEMPLATE,
        height=400,
    )

    return fig


def plotDampingCurve(
    radius: float,
    speed: float = 1.0,
    config: PhysicsConfig | None = None,
    waterHeight: float = 0.0,
) -> go.Figure:
    '''
    Damping coefficient and submerged fraction across the surface.

    Sweeps the sphere center from fully submerged to dry at a fixed
    speed, showing continuity across the regime boundaries.

    Parameters:
    -----------
    radius : float
        Sphere radius [m]
    speed : float
        Vertical speed used for the drag law [m/s]
    config : PhysicsConfig
        Physical constants (defaults from constants)
    waterHeight : float
        Water level [m]

    Returns:
    --------
    go.Figure : Plotly figure with two stacked panels
    '''
    model = DampingModel(config)
    centerYs = np.linspace(waterHeight - 2.0 * radius, waterHeight + 2.0 * radius, 201)
    velocity = np.array([0.0, speed, 0.0])

    damping = [model.dampingCoefficient(radius, y, waterHeight, velocity) for y in centerYs]
    fraction = [submergedFraction(radius, y, waterHeight) for y in centerYs]

    fig = make_subplots(
        rows=2, cols=1, shared_xaxes=True,
        subplot_titles=('Damping Coefficient', 'Submerged Fraction'),
    )

    fig.add_trace(go.Scatter(
        x=centerYs, y=damping, mode='lines', name='damping',
        line=dict(color=theme.DAMPING, width=2),
    ), row=1, col=1)
    fig.add_trace(go.Scatter(
        x=centerYs, y=fraction, mode='lines', name='V_sub / V',
        line=dict(color=theme.WATER, width=2),
    ), row=2, col=1)

    # Regime boundaries: dry above y = h + r, deep below y = h
    for boundary in (waterHeight, waterHeight + radius):
        fig.add_vline(x=boundary, line_dash='dash', line_color=theme.REFERENCE_LINE)

    fig.update_xaxes(title_text='Center height (m)', row=2, col=1)
    fig.update_layout(
        title=f'Submersion Damping (r = {radius:.2f} m, v = {speed:.2f} m/s)',
        template=theme.TEMPLATE,
        height=600,
        showlegend=False,
    )

    return fig
