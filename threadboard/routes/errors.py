from flask import current_app, jsonify

from threadboard.errors import (
    NotFoundError,
    PermissionDeniedError,
    StorageUnavailableError,
)


def _bad_request(e):
    return jsonify({"error": str(e)}), 400


def _not_found(e):
    return jsonify({"error": str(e)}), 404


def _forbidden(e):
    return jsonify({"error": str(e)}), 403


def _storage_unavailable(e):
    current_app.logger.exception("Storage failure: %s", e)
    return jsonify({"error": "Storage unavailable"}), 503


def register_error_handlers(app):
    # InvalidCursorError and PaginationValidationError are ValueErrors
    app.register_error_handler(ValueError, _bad_request)
    app.register_error_handler(NotFoundError, _not_found)
    app.register_error_handler(PermissionDeniedError, _forbidden)
    app.register_error_handler(StorageUnavailableError, _storage_unavailable)
