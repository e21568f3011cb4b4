import logging
from flask import jsonify
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    pass


class BadRequestError(Exception):
    pass


def validation_message(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'body'}: {detail['msg']}"
        for detail in error.errors()
    )


def register_error_handlers(app):
    @app.errorhandler(NotFoundError)
    def not_found(e):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(BadRequestError)
    def bad_request(e):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(ValidationError)
    def invalid_payload(e):
        return jsonify({"message": validation_message(e)}), 400

    @app.errorhandler(IntegrityError)
    def conflicting_write(e):
        logger.warning("Rejected write: %s", e.orig)
        return jsonify({"message": "Record conflicts with existing data"}), 400

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def internal_error(e):
        logger.exception("Unhandled error")
        return jsonify({"message": "Internal server error"}), 500
