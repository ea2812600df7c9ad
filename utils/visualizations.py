"""Visualization utilities for the business case."""

import plotly.graph_objects as go

from utils.formatting import format_currency, format_currency_short


def create_benefit_cost_chart(chart_df):
    """Cumulative benefit vs cost lines from a month/benefit/cost frame."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=chart_df['month'],
        y=chart_df['benefit'],
        mode='lines',
        name='Cumulative Benefit',
        line=dict(color='#22d3ee', width=2.5),
        customdata=[format_currency(v) for v in chart_df['benefit']],
        hovertemplate='%{x}: %{customdata}<extra>Benefit</extra>'
    ))
    fig.add_trace(go.Scatter(
        x=chart_df['month'],
        y=chart_df['cost'],
        mode='lines',
        name='Cumulative Cost',
        line=dict(color='#a78bfa', width=2.5),
        customdata=[format_currency(v) for v in chart_df['cost']],
        hovertemplate='%{x}: %{customdata}<extra>Cost</extra>'
    ))

    # Axis ticks in abbreviated currency
    values = list(chart_df['benefit']) + list(chart_df['cost'])
    top = max(values) if values else 0
    ticks = [top * i / 4 for i in range(5)] if top > 0 else [0]
    fig.update_layout(
        title='Cumulative Benefit vs Cost',
        xaxis_title='Month',
        yaxis_title='Amount ($)',
        height=320,
        yaxis=dict(tickvals=ticks, ticktext=[format_currency_short(t) for t in ticks])
    )
    return fig
