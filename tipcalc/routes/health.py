"""
Tip Calculator Health Routes
Health, readiness and liveness probes.
"""

from decimal import Decimal
from flask import Blueprint, jsonify
import structlog

from tipcalc.config import get_config
from tipcalc.services import calculate
from tipcalc.utils import format_currency

logger = structlog.get_logger(__name__)

health_bp = Blueprint('health', __name__)

# Known answer: 20% of 50.00 is 10.00, total 60.00
_PROBE_AMOUNT = Decimal('50.00')
_PROBE_PERCENT = Decimal('20')
_PROBE_TOTAL = Decimal('60.00')


@health_bp.route('/health', methods=['GET'])
def health():
    """
    Health check endpoint.

    Checks:
    - Calculator reproduces a known total
    - Number data for the default locale loads

    Returns 200 if healthy, 503 if degraded.
    """
    status = {
        'status': 'healthy',
        'checks': {}
    }
    is_healthy = True

    breakdown = calculate(_PROBE_AMOUNT, _PROBE_PERCENT)
    calculator_ok = breakdown.total == _PROBE_TOTAL
    status['checks']['calculator'] = {'healthy': calculator_ok}
    if not calculator_ok:
        is_healthy = False

    calculator_config = get_config().calculator
    try:
        format_currency(breakdown.total, calculator_config.default_locale, calculator_config.currency)
        status['checks']['locale'] = {
            'healthy': True,
            'locale': calculator_config.default_locale
        }
    except ValueError as e:
        logger.warning("Locale check failed", error=str(e))
        is_healthy = False
        status['checks']['locale'] = {
            'healthy': False,
            'error': 'Locale data unavailable'
        }

    # Set overall status
    if not is_healthy:
        status['status'] = 'degraded'
        return jsonify(status), 503

    return jsonify(status), 200


@health_bp.route('/ready', methods=['GET'])
def ready():
    """
    Readiness probe for orchestrators.

    Returns 200 if app is ready to accept traffic.
    """
    return jsonify({'ready': True}), 200


@health_bp.route('/live', methods=['GET'])
def live():
    """
    Liveness probe for orchestrators.

    Returns 200 if app process is alive.
    """
    return jsonify({'alive': True}), 200
