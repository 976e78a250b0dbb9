"""Tests for resolving a date to its Mass record."""

from datetime import date, timedelta

import pytest

from lectionary.errors import InvalidDateError
from lectionary.feasts import FIXED_FEASTS, Color, get_fixed_feast, sancti_key_for
from lectionary.resolver import ResolvedDay, Source, parse_date, resolve, resolve_day


def test_ash_wednesday():
    assert resolve_day(date(2024, 2, 14)) == ResolvedDay(
        "Quadp3-3", "02-14", "Ash Wednesday", Color.VIOLET, Source.TEMPORA
    )


def test_easter_sunday():
    assert resolve_day(date(2024, 3, 31)) == ResolvedDay(
        "Pasc0-0", "03-31", "Easter Sunday", Color.WHITE, Source.TEMPORA
    )


def test_christmas_is_governed_by_sanctoral():
    resolved = resolve_day(date(2024, 12, 25))
    assert resolved.sancti_key == "12-25"
    assert resolved.title == "Nativity of Our Lord"
    assert resolved.color == "white"
    assert resolved.source == "sancti"
    # The tempora key is still computed.
    assert resolved.tempora_key == "Adv4-3"


def test_pentecost_and_trinity():
    pentecost = resolve_day(date(2024, 5, 19))
    assert pentecost.title == "Pentecost Sunday"
    assert pentecost.color is Color.RED
    assert resolve_day(date(2024, 5, 26)).title == "Trinity Sunday"


def test_circumcision():
    resolved = resolve_day(date(2024, 1, 1))
    assert resolved.tempora_key == "Nat1-0"
    assert resolved.sancti_key == "01-01"
    assert resolved.title == "Circumcision of Our Lord"
    assert resolved.source is Source.SANCTI


def test_all_souls_is_black():
    resolved = resolve_day(date(2024, 11, 2))
    assert resolved == ResolvedDay("Pent23-6", "11-02", "All Souls", Color.BLACK, Source.SANCTI)


def test_fixed_feast_in_holy_week_keeps_tempora_key():
    resolved = resolve_day(date(2024, 3, 25))
    assert resolved.title == "Annunciation of the B.V.M."
    assert resolved.tempora_key == "Quad6-1"


def test_fixed_feast_table_has_sixteen_entries():
    assert len(FIXED_FEASTS) == 16
    assert get_fixed_feast("06-29").color is Color.RED
    assert get_fixed_feast("07-01") is None
    with pytest.raises(TypeError):
        FIXED_FEASTS["07-01"] = FIXED_FEASTS["06-29"]


def test_sancti_key_is_month_day_and_resolution_is_idempotent():
    day = date(2024, 1, 1)
    while day.year == 2024:
        resolved = resolve_day(day)
        assert resolved.sancti_key == sancti_key_for(day) == day.strftime("%m-%d")
        assert resolve_day(day) == resolved
        expected_source = Source.SANCTI if resolved.sancti_key in FIXED_FEASTS else Source.TEMPORA
        assert resolved.source is expected_source
        day += timedelta(days=1)


def test_record_is_tab_delimited_in_field_order():
    record = resolve_day(date(2024, 2, 14)).as_record()
    assert record == "Quadp3-3\t02-14\tAsh Wednesday\tviolet\ttempora"


def test_to_dict_uses_plain_strings():
    data = resolve_day(date(2024, 11, 2)).to_dict()
    assert data == {
        "tempora_key": "Pent23-6",
        "sancti_key": "11-02",
        "title": "All Souls",
        "color": "black",
        "source": "sancti",
    }
    assert type(data["color"]) is str


def test_parse_date_accepts_iso_dates():
    assert parse_date("2024-02-14") == date(2024, 2, 14)
    assert parse_date(" 2024-02-14\n") == date(2024, 2, 14)


@pytest.mark.parametrize("text", ["", "yesterday", "2024-02-30", "2024-13-01", "14/02/2024", "2024-02-14T00:00"])
def test_parse_date_rejects_invalid_text(text):
    with pytest.raises(InvalidDateError, match=r"Usage: lectionary-cal \[YYYY-MM-DD\]"):
        parse_date(text)


def test_invalid_date_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_date("nope")


def test_resolve_defaults_to_today(monkeypatch):
    import lectionary.resolver as resolver

    monkeypatch.setattr(resolver, "today", lambda tz_name=None: date(2024, 2, 14))
    assert resolve().tempora_key == "Quadp3-3"
    assert resolve("2024-03-31").tempora_key == "Pasc0-0"


def test_today_honours_time_zone():
    from lectionary.resolver import today

    assert isinstance(today("Pacific/Kiritimati"), date)


def test_resolve_rejects_supplied_empty_text(monkeypatch):
    import lectionary.resolver as resolver

    monkeypatch.setattr(resolver, "today", lambda tz_name=None: date(2024, 2, 14))
    with pytest.raises(InvalidDateError):
        resolve("")


def test_resolve_day_in_first_year():
    resolved = resolve_day(date(1, 1, 3))
    assert resolved.sancti_key == "01-03"
    assert resolved.title == "Day within Christmas Octave (Jan 3)"
    assert resolved.source is Source.TEMPORA
