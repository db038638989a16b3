"""Unit conversion utilities using pint.

All planning data is stored in US customary units:
- Forage mass: pounds of dry matter (lb DM)
- Forage density: lb DM per acre (lb/ac)
- Area: acres (ac)
- Money: US dollars

Display units are controlled by settings.display_units:
- "imperial": Display as stored (lb, lb/ac, ac)
- "metric": Convert to kg, kg/ha, ha

Currency is never converted.
"""

import pint

from agriops.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


# =============================================================================
# Conversions
# =============================================================================


def lb_to_kg(lb: float) -> float:
    """Convert pounds to kilograms."""
    ureg = get_ureg()
    return (lb * ureg.pound).to(ureg.kilogram).magnitude


def acres_to_hectares(acres: float) -> float:
    """Convert acres to hectares."""
    ureg = get_ureg()
    return (acres * ureg.acre).to(ureg.hectare).magnitude


def lb_per_acre_to_kg_per_ha(lb_ac: float) -> float:
    """Convert a forage density from lb/ac to kg/ha."""
    ureg = get_ureg()
    return (lb_ac * ureg.pound / ureg.acre).to(ureg.kilogram / ureg.hectare).magnitude


# =============================================================================
# Display Formatting
# =============================================================================


def format_dm_rate(lb_ac: float, decimals: int = 0) -> str:
    """Format a forage density for display.

    Args:
        lb_ac: Density in lb DM/ac
        decimals: Number of decimal places

    Returns:
        Formatted string like "960 lb/ac" or "1,076 kg/ha"
    """
    if settings.display_units == "metric":
        return f"{lb_per_acre_to_kg_per_ha(lb_ac):,.{decimals}f} kg/ha"
    return f"{lb_ac:,.{decimals}f} lb/ac"


def format_mass(lb: float, decimals: int = 0) -> str:
    """Format a dry-matter mass for display ("4,800 lb" or "2,177 kg")."""
    if settings.display_units == "metric":
        return f"{lb_to_kg(lb):,.{decimals}f} kg"
    return f"{lb:,.{decimals}f} lb"


def format_area(acres: float, decimals: int = 1) -> str:
    """Format an area for display ("12.0 ac" or "4.9 ha")."""
    if settings.display_units == "metric":
        return f"{acres_to_hectares(acres):,.{decimals}f} ha"
    return f"{acres:,.{decimals}f} ac"


def format_currency(amount: float) -> str:
    """Format a dollar amount rounded to whole dollars ("$1,234", "-$5")."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def is_imperial() -> bool:
    """Check if display units are imperial."""
    return settings.display_units == "imperial"
