"""Fixed feasts of the Sanctoral that take precedence over the Temporal cycle."""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class Color(str, Enum):
    WHITE = "white"
    RED = "red"
    BLACK = "black"
    GREEN = "green"
    VIOLET = "violet"

    def __str__(self):
        return self.value


class FixedFeast(NamedTuple):
    title: str
    color: Color


# Class I/II feasts with their own Mass in the Sanctoral, keyed by MM-DD.
FIXED_FEASTS = MappingProxyType(
    {
        "01-01": FixedFeast("Circumcision of Our Lord", Color.WHITE),
        "01-06": FixedFeast("Epiphany of Our Lord", Color.WHITE),
        "02-02": FixedFeast("Purification of the B.V.M.", Color.WHITE),
        "03-19": FixedFeast("St. Joseph, Spouse of the B.V.M.", Color.WHITE),
        "03-25": FixedFeast("Annunciation of the B.V.M.", Color.WHITE),
        "06-24": FixedFeast("Nativity of St. John the Baptist", Color.WHITE),
        "06-29": FixedFeast("Sts. Peter and Paul", Color.RED),
        "08-06": FixedFeast("Transfiguration of Our Lord", Color.WHITE),
        "08-15": FixedFeast("Assumption of the B.V.M.", Color.WHITE),
        "09-08": FixedFeast("Nativity of the B.V.M.", Color.WHITE),
        "09-14": FixedFeast("Exaltation of the Holy Cross", Color.RED),
        "09-29": FixedFeast("Dedication of St. Michael", Color.WHITE),
        "11-01": FixedFeast("All Saints", Color.WHITE),
        "11-02": FixedFeast("All Souls", Color.BLACK),
        "12-08": FixedFeast("Immaculate Conception", Color.WHITE),
        "12-25": FixedFeast("Nativity of Our Lord", Color.WHITE),
    }
)


def sancti_key_for(day):
    """Return the Sanctoral key (``MM-DD``) for a date."""
    return f"{day.month:02d}-{day.day:02d}"


def get_fixed_feast(sancti_key):
    """Return the :class:`FixedFeast` for ``sancti_key``, or None."""
    return FIXED_FEASTS.get(sancti_key)
