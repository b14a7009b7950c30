# money_plant/errors.py
import logging

from .helpers import api_response

logger = logging.getLogger("money-plant.errors")


def register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request(e): return api_response(400, "Bad request")

    @app.errorhandler(404)
    def not_found(e): return api_response(404, "Not found")

    @app.errorhandler(405)
    def method_not_allowed(e): return api_response(405, "Method not allowed")

    @app.errorhandler(413)
    def too_large(e): return api_response(413, "Request body too large")

    @app.errorhandler(500)
    def server_error(e):
        original = getattr(e, "original_exception", None) or e
        logger.error("Unhandled server error", exc_info=original)
        return api_response(500, "Internal server error")
