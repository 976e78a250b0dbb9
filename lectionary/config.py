import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    # Calendar
    # IANA zone used to decide "today" when no date is supplied; blank = server local date.
    CALENDAR_TIMEZONE = os.environ.get("CALENDAR_TIMEZONE", "").strip()
    MISSA_RECORD_SEPARATOR = os.environ.get("MISSA_RECORD_SEPARATOR", "\t")

    # Rate limiting
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "600 per hour")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")

    # Logging
    LOG_DIR = os.environ.get("LOG_DIR", str(BASE_DIR / "logs"))


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False

    @classmethod
    def init_app(cls, app):
        tz_name = os.environ.get("CALENDAR_TIMEZONE", "").strip()
        if tz_name:
            try:
                ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise RuntimeError(f"CALENDAR_TIMEZONE {tz_name!r} is not a known IANA time zone.") from exc

        if os.environ.get("MISSA_RECORD_SEPARATOR", "\t") == "":
            raise RuntimeError("MISSA_RECORD_SEPARATOR must not be empty.")


class TestingConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False
    CALENDAR_TIMEZONE = ""
    MISSA_RECORD_SEPARATOR = "\t"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
