"""
Interactive Plotly figures for a solved dispatch plan.

- Dispatch profile: charge/discharge bars with the price signal overlaid
- Energy evolution: stored energy with the capacity window as reference
"""

from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

try:
    import plotly.graph_objects as go
    from plotly.subplots import make_subplots
    PLOTLY_AVAILABLE = True
except ImportError:
    PLOTLY_AVAILABLE = False

from battery_dispatch.core.battery_core import BatteryCore
from battery_dispatch.optimization.dispatch_optimizer import DispatchPlan, DispatchResult
from battery_dispatch.visualization.color_schemes import get_color_scheme, get_rgba_with_alpha


def _require_plan(result: DispatchResult) -> DispatchPlan:
    if not PLOTLY_AVAILABLE:
        raise ImportError("plotly required for visualizations. Install with: pip install plotly")
    if result.plan is None:
        raise ValueError(f"Cannot plot a result without a plan (status: {result.status.value})")
    return result.plan


def _time_axis(n_points: int, start_date: Optional[str], dt_hours: float) -> List[Any]:
    if start_date:
        start = pd.to_datetime(start_date)
        return [start + pd.Timedelta(hours=t * dt_hours) for t in range(n_points)]
    return [t * dt_hours for t in range(n_points)]


class DispatchPlots:
    """
    Factory class for dispatch visualizations.

    All methods are static and return plotly.graph_objects.Figure instances
    that can be displayed (.show()) or saved (.write_html()).
    """

    @staticmethod
    def create_dispatch_profile(
        result: DispatchResult,
        start_date: Optional[str] = None,
        dt_hours: float = 1.0,
        template: str = 'plotly_white',
    ) -> Any:  # go.Figure
        """
        Create charge/discharge bars with the price on a secondary axis.

        Discharge is drawn upwards (selling), charge downwards (buying).

        Args:
            result: DispatchResult with an optimal plan.
            start_date: Optional start timestamp (e.g. '2024-01-01 00:00').
                If None, the x-axis shows hours from start.
            dt_hours: Duration of one time step [h], used for the x-axis only.
            template: Plotly template name.

        Raises:
            ImportError: If plotly is not installed.
            ValueError: If the result carries no plan.
        """
        plan = _require_plan(result)
        colors = get_color_scheme(template)
        time_axis = _time_axis(plan.n_timesteps, start_date, dt_hours)

        fig = make_subplots(specs=[[{"secondary_y": True}]])

        fig.add_trace(
            go.Bar(
                x=time_axis,
                y=plan.discharge_power.tolist(),
                name='Discharge',
                marker=dict(color=colors.discharge_color),
            ),
            secondary_y=False,
        )
        fig.add_trace(
            go.Bar(
                x=time_axis,
                y=(-plan.charge_power).tolist(),
                name='Charge',
                marker=dict(color=colors.charge_color),
            ),
            secondary_y=False,
        )

        # Price line after bars so it is drawn on top
        fig.add_trace(
            go.Scatter(
                x=time_axis,
                y=plan.prices.tolist(),
                mode='lines',
                name='Price',
                line=dict(color=colors.price_color, width=2.5, shape='hv'),
            ),
            secondary_y=True,
        )

        xaxis_title = 'Date / Time' if start_date else 'Time [hours]'
        fig.update_xaxes(title_text=xaxis_title)
        fig.update_yaxes(title_text='Power [kWh/step]', secondary_y=False)
        fig.update_yaxes(title_text='Price', secondary_y=True)
        fig.update_layout(
            title=f'Dispatch Profile (profit {plan.objective_value:,.2f})',
            hovermode='x unified',
            barmode='relative',
            legend=dict(
                orientation="h",
                yanchor="bottom",
                y=1.02,
                xanchor="right",
                x=1
            ),
            template=template,
        )
        return fig

    @staticmethod
    def create_energy_evolution(
        result: DispatchResult,
        battery: BatteryCore,
        start_date: Optional[str] = None,
        dt_hours: float = 1.0,
        template: str = 'plotly_white',
    ) -> Any:  # go.Figure
        """
        Create the stored-energy trajectory E[0..T] with capacity limits.

        Args:
            result: DispatchResult with an optimal plan.
            battery: Battery whose capacity limits are drawn as reference.
            start_date: Optional start timestamp (e.g. '2024-01-01 00:00').
            dt_hours: Duration of one time step [h].
            template: Plotly template name.

        Raises:
            ImportError: If plotly is not installed.
            ValueError: If the result carries no plan.
        """
        plan = _require_plan(result)
        colors = get_color_scheme(template)
        time_axis = _time_axis(plan.n_timesteps + 1, start_date, dt_hours)

        fig = go.Figure()

        fig.add_hrect(
            y0=battery.capacity_min,
            y1=battery.capacity_max,
            fillcolor=get_rgba_with_alpha(colors.operating_range_color, 0.08),
            line_width=0,
            annotation_text="Operating range",
            annotation_position="left",
        )

        fig.add_trace(go.Scatter(
            x=time_axis,
            y=plan.energy.tolist(),
            mode='lines+markers',
            name='Stored energy',
            line=dict(color=colors.energy_color, width=3),
            marker=dict(size=6),
        ))

        fig.add_hline(
            y=battery.capacity_min,
            line_dash="dash",
            line_color=colors.limit_color,
            annotation_text=f"Min ({battery.capacity_min:.0f} kWh)",
            annotation_position="right",
        )
        fig.add_hline(
            y=battery.capacity_max,
            line_dash="dash",
            line_color=colors.limit_color,
            annotation_text=f"Max ({battery.capacity_max:.0f} kWh)",
            annotation_position="right",
        )

        m = plan.metrics
        xaxis_title = 'Date / Time' if start_date else 'Time [hours]'
        fig.update_layout(
            title=f'Stored Energy ({m.cycle_count_round_trip:.2f} equivalent cycles)',
            xaxis_title=xaxis_title,
            yaxis_title='Energy [kWh]',
            yaxis=dict(range=[0, battery.capacity_max * 1.05]),
            hovermode='x',
            template=template,
        )
        return fig
