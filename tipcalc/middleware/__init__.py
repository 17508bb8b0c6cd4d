"""
Tip Calculator Middleware Package
Error handling shared by all routes.
"""

from tipcalc.middleware.error_handler import (
    error_response,
    register_error_handlers,
    safe_handler,
    ERROR_CODES,
)

__all__ = [
    'error_response',
    'register_error_handlers',
    'safe_handler',
    'ERROR_CODES',
]
