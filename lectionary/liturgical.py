"""Liturgical calendar utilities.

Computes Easter and the moveable boundaries of the traditional Roman
calendar for a given year.  Easter is calculated using the anonymous
Gregorian algorithm (Meeus / Oudin).
"""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache

SUNDAY = 6  # date.weekday() numbering: 0=Monday ... 6=Sunday


def get_easter_date(year):
    """Return the date of Easter Sunday for the given year.

    Uses the anonymous Gregorian algorithm (also known as the
    Meeus/Jones/Butcher algorithm).
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def day_of_week(day):
    """Return the weekday numbered as in the Missal keys: 0=Sunday ... 6=Saturday."""
    return day.isoweekday() % 7


def next_sunday(day):
    """Return the first Sunday on or after ``day``."""
    while day.weekday() != SUNDAY:
        day += timedelta(days=1)
    return day


def _advent_start(year):
    """Return the date of the first Sunday of Advent for the given year.

    Advent begins on the Sunday nearest to the feast of St. Andrew
    (November 30): counting from four weeks before Christmas Day, it is
    the first Sunday on or after November 27, i.e. on or before December 3.
    """
    return next_sunday(date(year, 12, 25) - timedelta(days=28))


@dataclass(frozen=True)
class Boundaries:
    """The moveable boundary dates of one liturgical year."""

    year: int
    easter: date
    epiphany: date
    septuagesima: date
    ash_wednesday: date
    passion_sunday: date
    palm_sunday: date
    ascension: date
    pentecost: date
    corpus_christi: date
    sacred_heart: date
    advent1: date

    def days_from_easter(self, day):
        return (day - self.easter).days


@lru_cache(maxsize=64)
def get_boundaries(year):
    """Return the :class:`Boundaries` for ``year``, derived from its Easter.

    Results are immutable, so they are memoized per year.
    """
    easter = get_easter_date(year)
    return Boundaries(
        year=year,
        easter=easter,
        epiphany=date(year, 1, 6),
        septuagesima=easter - timedelta(days=63),
        ash_wednesday=easter - timedelta(days=46),
        passion_sunday=easter - timedelta(days=14),
        palm_sunday=easter - timedelta(days=7),
        ascension=easter + timedelta(days=39),
        pentecost=easter + timedelta(days=49),
        corpus_christi=easter + timedelta(days=60),
        sacred_heart=easter + timedelta(days=68),
        advent1=_advent_start(year),
    )
