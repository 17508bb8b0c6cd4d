"""
Tip Calculator Identifiers
Request identifiers for log correlation.
"""

from datetime import datetime, timezone
import secrets


def generate_request_id() -> str:
    """
    Generate unique request ID for tracking and debugging.

    The timestamp prefix keeps IDs roughly time ordered in logs.

    Returns:
        Unique request identifier
    """
    timestamp = datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')
    random_part = secrets.token_hex(8)
    return f"req_{timestamp}_{random_part}"
