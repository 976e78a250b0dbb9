"""Human-readable titles for days of the Temporal cycle."""

from datetime import timedelta

from .liturgical import day_of_week, get_boundaries, next_sunday

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
PRE_LENT_SUNDAYS = ("Septuagesima", "Sexagesima", "Quinquagesima")


def ordinal(n):
    """Return ``n`` with its English ordinal suffix (1st, 2nd, 3rd, 4th, 11th, 21st...)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _sunday_or_feria(day, sunday_title, feria_title):
    return sunday_title if day_of_week(day) == 0 else feria_title


def _moveable_feast_title(day, b):
    named = {
        b.ascension: "Ascension of Our Lord",
        b.pentecost: "Pentecost Sunday",
        b.pentecost + timedelta(days=7): "Trinity Sunday",
        b.corpus_christi: "Corpus Christi",
        b.sacred_heart: "Sacred Heart of Jesus",
        b.ash_wednesday: "Ash Wednesday",
        b.palm_sunday: "Palm Sunday",
        b.easter - timedelta(days=3): "Holy Thursday",
        b.easter - timedelta(days=2): "Good Friday",
        b.easter - timedelta(days=1): "Holy Saturday",
        b.easter: "Easter Sunday",
    }
    if day in named:
        return named[day]
    if 0 < b.days_from_easter(day) < 7:
        return f"{WEEKDAY_NAMES[day_of_week(day)]} in Easter Week"
    return None


def _after_epiphany_title(day, b):
    if not b.epiphany < day < b.septuagesima:
        return None
    first_sunday = next_sunday(b.epiphany)
    week = (day - first_sunday).days // 7 + 1 if day >= first_sunday else 1
    return _sunday_or_feria(
        day,
        f"{ordinal(week)} Sunday after Epiphany",
        f"Feria of {ordinal(week)} week after Epiphany",
    )


def _septuagesima_title(day, b):
    if not b.septuagesima <= day < b.ash_wednesday:
        return None
    week = min((day - b.septuagesima).days // 7, 2)
    name = PRE_LENT_SUNDAYS[week]
    return _sunday_or_feria(day, f"{name} Sunday", f"Feria of {name} week")


def _lent_title(day, b):
    if not b.ash_wednesday < day < b.passion_sunday:
        return None
    first_sunday = b.ash_wednesday + timedelta(days=4)
    if day < first_sunday:
        return "Feria after Ash Wednesday"
    week = (day - first_sunday).days // 7 + 1
    return _sunday_or_feria(
        day,
        f"{ordinal(week)} Sunday of Lent",
        f"Feria of {ordinal(week)} week of Lent",
    )


def _passiontide_title(day, b):
    if not b.passion_sunday <= day < b.palm_sunday:
        return None
    return _sunday_or_feria(day, "Passion Sunday", "Feria of Passion week")


def _holy_week_title(day, b):
    if not b.palm_sunday < day < b.easter - timedelta(days=3):
        return None
    return f"{WEEKDAY_NAMES[day_of_week(day)]} of Holy Week"


def _eastertide_title(day, b):
    days = b.days_from_easter(day)
    if not 7 <= days < 49:
        return None
    week = days // 7
    return _sunday_or_feria(
        day,
        f"{ordinal(week)} Sunday after Easter",
        f"Feria of {ordinal(week)} week after Easter",
    )


def _after_pentecost_title(day, b):
    if not b.pentecost < day < b.advent1:
        return None
    weeks = (day - b.pentecost).days // 7
    return _sunday_or_feria(
        day,
        f"{ordinal(weeks)} Sunday after Pentecost",
        f"Feria of {ordinal(weeks)} week after Pentecost",
    )


def _advent_title(day, b):
    if not (day >= b.advent1 and day.month == 12 and day.day < 25):
        return None
    week = (day - b.advent1).days // 7 + 1
    return _sunday_or_feria(
        day,
        f"{ordinal(week)} Sunday of Advent",
        f"Feria of {ordinal(week)} week of Advent",
    )


def _christmas_title(day, b):
    if day.month == 12 and day.day >= 25:
        if day.day == 25:
            return "Christmas Day"
        return f"Day {day.day - 25 + 1} of Christmas Octave"
    if day.month == 1 and day.day <= 5:
        return f"Day within Christmas Octave (Jan {day.day})"
    return None


TITLE_RULES = (
    _moveable_feast_title,
    _after_epiphany_title,
    _septuagesima_title,
    _lent_title,
    _passiontide_title,
    _holy_week_title,
    _eastertide_title,
    _after_pentecost_title,
    _advent_title,
    _christmas_title,
)


def get_title(day, boundaries=None):
    """Return the title of ``day`` in the Temporal cycle.

    Falls back to the plain month and day (e.g. ``January 06``) for a day
    no rule names.
    """
    boundaries = boundaries or get_boundaries(day.year)
    for rule in TITLE_RULES:
        title = rule(day, boundaries)
        if title is not None:
            return title
    return day.strftime("%B %d")
