"""Tests for the ``flask missa`` command."""

from datetime import date


def test_missa_command_prints_record(runner):
    result = runner.invoke(args=["missa", "2024-02-14"])
    assert result.exit_code == 0
    assert result.output == "Quadp3-3\t02-14\tAsh Wednesday\tviolet\ttempora\n"


def test_missa_command_fixed_feast(runner):
    result = runner.invoke(args=["missa", "2024-11-02"])
    assert result.exit_code == 0
    assert result.output.strip().split("\t") == ["Pent23-6", "11-02", "All Souls", "black", "sancti"]


def test_missa_command_defaults_to_today(runner, monkeypatch):
    import lectionary.resolver as resolver

    monkeypatch.setattr(resolver, "today", lambda tz_name=None: date(2024, 3, 31))
    result = runner.invoke(args=["missa"])
    assert result.exit_code == 0
    assert result.output.startswith("Pasc0-0\t03-31\tEaster Sunday")


def test_missa_command_rejects_invalid_date(runner):
    result = runner.invoke(args=["missa", "2024-13-45"])
    assert result.exit_code == 2
    assert "Usage: lectionary-cal [YYYY-MM-DD]" in result.output


def test_missa_command_rejects_empty_date(runner, monkeypatch):
    import lectionary.resolver as resolver

    monkeypatch.setattr(resolver, "today", lambda tz_name=None: date(2024, 2, 14))
    result = runner.invoke(args=["missa", ""])
    assert result.exit_code == 2
    assert "Usage: lectionary-cal [YYYY-MM-DD]" in result.output
    assert "Quadp3-3" not in result.output
