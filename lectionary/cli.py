import click
from flask import current_app

from .errors import InvalidDateError
from .resolver import resolve


def register_commands(app):
    @app.cli.command("missa")
    @click.argument("date_text", required=False, metavar="[YYYY-MM-DD]")
    def missa(date_text):
        """Print the tempora key, sancti key, title, color and source for a date."""
        try:
            resolved = resolve(date_text, current_app.config.get("CALENDAR_TIMEZONE"))
        except InvalidDateError as exc:
            raise click.UsageError(str(exc)) from exc
        click.echo(resolved.as_record(current_app.config["MISSA_RECORD_SEPARATOR"]))
