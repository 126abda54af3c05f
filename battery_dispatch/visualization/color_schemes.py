"""
Color schemes for light and dark mode dispatch plots.

Colors are grouped by meaning (charge, discharge, energy, price, limits), so
plotting code references `colors.charge_color` rather than a hue. Templates
whose name contains 'dark' get the dark scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class ColorScheme:
    """Semantic colors for one plot theme."""

    # Battery operation
    charge_color: str
    discharge_color: str
    energy_color: str

    # Market signal
    price_color: str

    # Indicators
    limit_color: str
    operating_range_color: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


LIGHT_MODE = ColorScheme(
    charge_color='rgb(255, 224, 130)',          # Light amber
    discharge_color='rgb(245, 166, 35)',        # Dark amber/orange
    energy_color='rgb(255, 193, 7)',            # Standard warning yellow
    price_color='rgb(0, 123, 255)',             # Standard Bootstrap primary
    limit_color='rgb(220, 53, 69)',             # Bootstrap danger red
    operating_range_color='rgb(40, 167, 69)',   # Bootstrap success green
)

DARK_MODE = ColorScheme(
    charge_color='rgb(255, 204, 77)',           # Medium sunny yellow
    discharge_color='rgb(255, 230, 138)',       # Lighter yellow
    energy_color='rgb(255, 214, 102)',          # Standard light yellow
    price_color='rgb(99, 179, 255)',            # Standard light blue
    limit_color='rgb(255, 107, 107)',           # Standard light coral
    operating_range_color='rgb(72, 219, 127)',  # Standard light mint
)


def get_color_scheme(template: str = 'plotly_white') -> ColorScheme:
    """
    Get the color scheme matching a Plotly template.

    Args:
        template: Plotly template name, e.g. 'plotly_white' or 'plotly_dark'.

    Returns:
        DARK_MODE for templates containing 'dark', LIGHT_MODE otherwise.
    """
    if 'dark' in template.lower():
        return DARK_MODE
    return LIGHT_MODE


def get_rgba_with_alpha(color: str, alpha: float) -> str:
    """
    Convert an 'rgb(r, g, b)' or 'rgba(r, g, b, a)' string to rgba with the given alpha.

    Other color formats (hex, named colors) are returned unchanged.

    Examples:
        >>> get_rgba_with_alpha('rgb(255, 0, 0)', 0.5)
        'rgba(255, 0, 0, 0.5)'
        >>> get_rgba_with_alpha('#FF0000', 0.5)
        '#FF0000'
    """
    if not color.startswith('rgb'):
        return color

    inner = color[color.index('(') + 1:color.rindex(')')]
    r, g, b = (part.strip() for part in inner.split(',')[:3])
    return f'rgba({r}, {g}, {b}, {alpha})'
