"""Flask glue shared by the feature controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def ok(**data):
    return jsonify({"success": True, **data})


def payload() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def make_guards(container):
    """Build login/admin decorators that put the SessionUser on ``g.current_user``."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            username = session.get("username")
            current = container.auth_service.session_for(username) if username else None
            if not current:
                session.clear()
                return error_response("Please log in to continue.", 401)
            g.current_user = current
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @login_required
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not g.current_user.is_admin:
                return error_response("Admin access required", 403)
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AuthenticationError)
    def _authentication(e):
        return error_response(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e):
        return error_response(str(e), 403)

    @app.errorhandler(DomainError)
    def _domain(e):
        return error_response(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return error_response(f"System error: {e}", 500)
        return error_response("System error", 500)
