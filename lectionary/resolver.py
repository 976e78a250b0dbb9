"""Resolve a calendar date to the keys of its Mass.

The result is the record consumed by the propers lookup tooling:
tempora key, sancti key, title, color and the source calendar that
governs the day.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple
from zoneinfo import ZoneInfo

from .colors import get_color
from .errors import InvalidDateError
from .feasts import Color, get_fixed_feast, sancti_key_for
from .liturgical import get_boundaries
from .tempora import get_tempora_key
from .titles import get_title

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


class Source(str, Enum):
    TEMPORA = "tempora"
    SANCTI = "sancti"

    def __str__(self):
        return self.value


class ResolvedDay(NamedTuple):
    tempora_key: str
    sancti_key: str
    title: str
    color: Color
    source: Source

    def as_record(self, sep="\t"):
        """Join the five fields into one delimited line."""
        return sep.join(str(field) for field in self)

    def to_dict(self):
        return {
            "tempora_key": self.tempora_key,
            "sancti_key": self.sancti_key,
            "title": self.title,
            "color": self.color.value,
            "source": self.source.value,
        }


def parse_date(text):
    """Parse ``YYYY-MM-DD`` text into a date, raising :class:`InvalidDateError`."""
    try:
        return datetime.strptime(str(text).strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(text) from exc


def today(tz_name=None):
    """Return the current date, in ``tz_name`` when given, else the local date."""
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()


def resolve_day(day):
    """Return the :class:`ResolvedDay` for ``day``.

    A fixed feast supplies the title and color and marks the day as
    governed by the Sanctoral; the tempora key is computed either way.
    """
    sancti_key = sancti_key_for(day)
    boundaries = get_boundaries(day.year)
    tempora_key = get_tempora_key(day, day.year, boundaries)

    feast = get_fixed_feast(sancti_key)
    if feast is not None:
        logger.debug("%s governed by fixed feast %s", day.isoformat(), feast.title)
        return ResolvedDay(tempora_key, sancti_key, feast.title, feast.color, Source.SANCTI)

    return ResolvedDay(
        tempora_key,
        sancti_key,
        get_title(day, boundaries),
        get_color(day, boundaries),
        Source.TEMPORA,
    )


def resolve(text=None, tz_name=None):
    """Resolve a ``YYYY-MM-DD`` string, or today when ``text`` is None."""
    day = today(tz_name) if text is None else parse_date(text)
    return resolve_day(day)
