"""
Visualization of dispatch results.

Usage:
    from battery_dispatch.visualization import DispatchPlots

    fig = DispatchPlots.create_dispatch_profile(result)
    fig.write_html('dispatch.html')
"""

from battery_dispatch.visualization.dispatch_plots import DispatchPlots
from battery_dispatch.visualization.color_schemes import (
    ColorScheme,
    DARK_MODE,
    LIGHT_MODE,
    get_color_scheme,
    get_rgba_with_alpha,
)

__all__ = [
    'DispatchPlots',
    'ColorScheme',
    'DARK_MODE',
    'LIGHT_MODE',
    'get_color_scheme',
    'get_rgba_with_alpha',
]
