"""Temporal cycle keys.

A tempora key names the Mass of the season for a given day, in the form
used by the Missal data files: ``<week>-<weekday>`` where the weekday is
0=Sunday ... 6=Saturday, e.g. ``Quad2-3`` is the Wednesday after the second
Sunday of Lent.

Classification is an ordered table of :class:`SeasonRule` entries, evaluated
first-match-wins.  The predicates are mutually exclusive and together cover
every day of the year, so at most one rule ever matches.
"""

import enum
import logging
from datetime import MINYEAR, date, timedelta
from typing import Callable, NamedTuple

from .liturgical import day_of_week, get_boundaries, next_sunday

logger = logging.getLogger(__name__)


class SeasonBucket(enum.Enum):
    CHRISTMAS_OCTAVE = "christmas_octave"
    BEFORE_EPIPHANY = "before_epiphany"
    EPIPHANY = "epiphany"
    AFTER_EPIPHANY = "after_epiphany"
    SEPTUAGESIMA = "septuagesima"
    LENT = "lent"
    PASSIONTIDE = "passiontide"
    HOLY_WEEK = "holy_week"
    EASTER_OCTAVE = "easter_octave"
    EASTERTIDE = "eastertide"
    PENTECOST_OCTAVE = "pentecost_octave"
    AFTER_PENTECOST = "after_pentecost"
    ADVENT = "advent"


class SeasonRule(NamedTuple):
    bucket: SeasonBucket
    matches: Callable[[date, int, object], bool]
    key: Callable[[date, int, object], str]


# -- Christmas -------------------------------------------------------------


def _in_christmas_octave(day, year, b):
    if year == MINYEAR:
        # No Dec 25 precedes year 1; only the Circumcision is left of the octave.
        return day == date(year, 1, 1)
    return date(year - 1, 12, 25) <= day <= date(year, 1, 1)


def _christmas_octave_key(day, year, b):
    if day == date(year, 1, 1):
        # Circumcision
        return "Nat1-0"
    offset = (day - date(year - 1, 12, 25)).days
    # The offset is appended directly, without a separator: Dec 30 is "Nat1-05".
    return f"Nat1-0{offset or ''}"


def _before_epiphany(day, year, b):
    return day.month == 1 and 2 <= day.day <= 5 and day < b.epiphany


def _before_epiphany_key(day, year, b):
    return f"Nat2-{day_of_week(day)}"


def _is_epiphany(day, year, b):
    return day == b.epiphany


def _epiphany_key(day, year, b):
    return "Epi1-0a"


# -- Time after Epiphany and Septuagesima ----------------------------------


def _after_epiphany(day, year, b):
    return b.epiphany < day < b.septuagesima


def _after_epiphany_key(day, year, b):
    first_sunday = next_sunday(b.epiphany + timedelta(days=1))
    if day < first_sunday:
        return f"Epi1-{day_of_week(day)}"
    week = (day - first_sunday).days // 7 + 1
    return f"Epi{week}-{day_of_week(day)}"


def _in_septuagesima(day, year, b):
    return b.septuagesima <= day < b.ash_wednesday


def _septuagesima_key(day, year, b):
    week = min((day - b.septuagesima).days // 7 + 1, 3)
    return f"Quadp{week}-{day_of_week(day)}"


# -- Lent ------------------------------------------------------------------


def _in_lent(day, year, b):
    return b.ash_wednesday <= day < b.passion_sunday


def _lent_key(day, year, b):
    days = (day - b.ash_wednesday).days
    if days < 4:
        # Ash Wednesday to Saturday continue the Quinquagesima week.
        return f"Quadp3-{days + 3}"
    first_sunday = b.ash_wednesday + timedelta(days=4)
    week = (day - first_sunday).days // 7 + 1
    return f"Quad{week}-{day_of_week(day)}"


def _in_passiontide(day, year, b):
    return b.passion_sunday <= day < b.palm_sunday


def _passiontide_key(day, year, b):
    return f"Quad5-{(day - b.passion_sunday).days % 7}"


def _in_holy_week(day, year, b):
    return b.palm_sunday <= day < b.easter


def _holy_week_key(day, year, b):
    return f"Quad6-{(day - b.palm_sunday).days}"


# -- Paschaltide -----------------------------------------------------------


def _in_easter_octave(day, year, b):
    return 0 <= b.days_from_easter(day) <= 6


def _easter_octave_key(day, year, b):
    return f"Pasc0-{b.days_from_easter(day)}"


def _in_eastertide(day, year, b):
    return 7 <= b.days_from_easter(day) <= 49


def _eastertide_key(day, year, b):
    days = b.days_from_easter(day)
    return f"Pasc{days // 7}-{days % 7}"


def _in_pentecost_octave(day, year, b):
    return b.pentecost < day < b.pentecost + timedelta(days=7)


def _pentecost_octave_key(day, year, b):
    return f"Pasc7-{(day - b.pentecost).days}"


# -- After Pentecost and Advent --------------------------------------------


def _after_pentecost(day, year, b):
    return b.pentecost + timedelta(days=7) <= day < b.advent1


def _after_pentecost_key(day, year, b):
    weeks = (day - b.pentecost).days // 7
    return f"Pent{weeks:02d}-{day_of_week(day)}"


def _in_advent(day, year, b):
    return day >= b.advent1


def _advent_key(day, year, b):
    week = (day - b.advent1).days // 7 + 1
    return f"Adv{week}-{day_of_week(day)}"


SEASON_RULES = (
    SeasonRule(SeasonBucket.CHRISTMAS_OCTAVE, _in_christmas_octave, _christmas_octave_key),
    SeasonRule(SeasonBucket.BEFORE_EPIPHANY, _before_epiphany, _before_epiphany_key),
    SeasonRule(SeasonBucket.EPIPHANY, _is_epiphany, _epiphany_key),
    SeasonRule(SeasonBucket.AFTER_EPIPHANY, _after_epiphany, _after_epiphany_key),
    SeasonRule(SeasonBucket.SEPTUAGESIMA, _in_septuagesima, _septuagesima_key),
    SeasonRule(SeasonBucket.LENT, _in_lent, _lent_key),
    SeasonRule(SeasonBucket.PASSIONTIDE, _in_passiontide, _passiontide_key),
    SeasonRule(SeasonBucket.HOLY_WEEK, _in_holy_week, _holy_week_key),
    SeasonRule(SeasonBucket.EASTER_OCTAVE, _in_easter_octave, _easter_octave_key),
    SeasonRule(SeasonBucket.EASTERTIDE, _in_eastertide, _eastertide_key),
    SeasonRule(SeasonBucket.PENTECOST_OCTAVE, _in_pentecost_octave, _pentecost_octave_key),
    SeasonRule(SeasonBucket.AFTER_PENTECOST, _after_pentecost, _after_pentecost_key),
    SeasonRule(SeasonBucket.ADVENT, _in_advent, _advent_key),
)


def _find_rule(day, year, boundaries):
    for rule in SEASON_RULES:
        if rule.matches(day, year, boundaries):
            return rule
    return None


def classify(day, year=None, boundaries=None):
    """Return the :class:`SeasonBucket` for ``day``, or None if no rule matches."""
    year = day.year if year is None else year
    boundaries = boundaries or get_boundaries(year)
    rule = _find_rule(day, year, boundaries)
    return rule.bucket if rule else None


def get_tempora_key(day, year=None, boundaries=None):
    """Return the Temporal cycle key for ``day``.

    ``year`` selects the liturgical year whose boundaries apply and
    defaults to the calendar year of ``day``.
    """
    year = day.year if year is None else year
    boundaries = boundaries or get_boundaries(year)
    rule = _find_rule(day, year, boundaries)
    if rule is None:
        logger.warning("No season rule matched %s in liturgical year %s.", day.isoformat(), year)
        return f"unknown-{day.isoformat()}"
    return rule.key(day, year, boundaries)
