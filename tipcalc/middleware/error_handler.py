"""
Tip Calculator Error Handler Middleware
Generic error responses without information disclosure.
"""

from functools import wraps
from typing import Callable, Optional
from flask import jsonify, g, Flask
from werkzeug.exceptions import HTTPException
import traceback
import structlog

logger = structlog.get_logger(__name__)


# Standard error codes
ERROR_CODES = {
    'VALIDATION_ERROR': 'Invalid request data',
    'NOT_FOUND': 'Resource not found',
    'METHOD_NOT_ALLOWED': 'Method not allowed for this resource',
    'INTERNAL_ERROR': 'An unexpected error occurred',
}


def error_response(
    code: str,
    message: Optional[str] = None,
    status: int = 400,
    details: Optional[dict] = None
):
    """
    Create standardized error response.

    WHY standardized: clients handle every error the same way.
    Messages stay generic; internals are only logged.
    """
    response_body = {
        'error': message or ERROR_CODES.get(code, 'An error occurred'),
        'code': code,
        'request_id': g.get('request_id')
    }

    # Only include safe details
    if details and isinstance(details, dict):
        safe_details = {
            k: v for k, v in details.items()
            if k in ('field', 'allowed_methods')
        }
        if safe_details:
            response_body['details'] = safe_details

    return jsonify(response_body), status


def register_error_handlers(app: Flask) -> None:
    """Register global error handlers on Flask app."""

    @app.errorhandler(400)
    def bad_request(error):
        return error_response('VALIDATION_ERROR', status=400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response('NOT_FOUND', 'Resource not found', status=404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        allowed = getattr(error, 'valid_methods', None)
        details = {'allowed_methods': sorted(allowed)} if allowed else None
        return error_response('METHOD_NOT_ALLOWED', status=405, details=details)

    @app.errorhandler(500)
    def internal_error(error):
        # Log full error internally
        logger.error(
            "Internal server error",
            error=str(error),
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )

        return error_response(
            'INTERNAL_ERROR',
            'An unexpected error occurred',
            status=500
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        # Registered HTTP handlers above cover these
        if isinstance(error, HTTPException):
            return error

        logger.error(
            "Unhandled exception",
            error=str(error),
            error_type=type(error).__name__,
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )

        return error_response(
            'INTERNAL_ERROR',
            'An unexpected error occurred',
            status=500
        )


def safe_handler(f: Callable) -> Callable:
    """
    Decorator for safe exception handling.

    Catches exceptions and returns generic error response.
    Logs full details internally.

    WHY ValueError only: it is the one error that describes the request;
    anything else is reported as internal.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValueError as e:
            logger.warning("Validation error", error=str(e))
            return error_response('VALIDATION_ERROR', str(e), status=400)
        except Exception as e:
            logger.error(
                "Handler exception",
                error=str(e),
                handler=f.__name__,
                traceback=traceback.format_exc()
            )
            return error_response('INTERNAL_ERROR', status=500)

    return decorated
