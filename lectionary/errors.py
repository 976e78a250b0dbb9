from flask import jsonify
from werkzeug.exceptions import HTTPException

USAGE = "Usage: lectionary-cal [YYYY-MM-DD]"


class InvalidDateError(ValueError):
    """Raised when caller-supplied date text is not a valid YYYY-MM-DD date."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date {value!r}. {USAGE}")


def register_error_handlers(app):
    @app.errorhandler(InvalidDateError)
    def invalid_date(e):
        app.logger.info("Rejected date %r", e.value)
        return jsonify(error="invalid_date", message=USAGE), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify(error="not_found", message=e.description), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(error="method_not_allowed", message=e.description), 405

    @app.errorhandler(429)
    def too_many_requests(e):
        app.logger.warning("429 Too Many Requests: %s", e.description)
        return jsonify(error="rate_limited", message=e.description), 429

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.exception("Internal server error: %s", e)
        return jsonify(error="internal_error", message="Internal server error"), 500

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify(error=e.name.lower().replace(" ", "_"), message=e.description), e.code
