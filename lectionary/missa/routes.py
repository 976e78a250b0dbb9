"""Public endpoints resolving a date to the keys of its Mass."""

from flask import Blueprint, Response, current_app, request

from ..resolver import parse_date, resolve_day, today

missa_bp = Blueprint("missa", __name__)


def _make_record_response(resolved):
    sep = current_app.config["MISSA_RECORD_SEPARATOR"]
    return Response(
        resolved.as_record(sep) + "\n",
        mimetype="text/tab-separated-values",
    )


def _respond(day):
    resolved = resolve_day(day)
    if request.args.get("format", "json").lower() == "tsv":
        return _make_record_response(resolved)
    return {"date": day.isoformat(), **resolved.to_dict()}


@missa_bp.route("/missa")
def current():
    """Resolve today's date in the configured calendar time zone."""
    return _respond(today(current_app.config.get("CALENDAR_TIMEZONE")))


@missa_bp.route("/missa/<date_text>")
def by_date(date_text):
    return _respond(parse_date(date_text))
