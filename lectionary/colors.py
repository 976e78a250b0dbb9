"""Liturgical color of the Temporal cycle."""

from .feasts import Color
from .liturgical import get_boundaries


def _is_christmastide(day):
    return (day.month == 12 and day.day >= 25) or (day.month == 1 and day.day <= 13)


COLOR_RULES = (
    (lambda day, b: day == b.pentecost, Color.RED),
    (lambda day, b: 0 <= b.days_from_easter(day) <= 55, Color.WHITE),
    (lambda day, b: _is_christmastide(day), Color.WHITE),
    (lambda day, b: b.septuagesima <= day < b.easter or day >= b.advent1, Color.VIOLET),
)


def get_color(day, boundaries=None):
    """Return the :class:`Color` of ``day``; green when no season rule applies."""
    boundaries = boundaries or get_boundaries(day.year)
    for matches, color in COLOR_RULES:
        if matches(day, boundaries):
            return color
    return Color.GREEN
