"""
Tip Calculator Routes
The tip screen and its JSON counterpart.
"""

from typing import Any, Mapping
from flask import Blueprint, request, jsonify, render_template
import structlog

from tipcalc.config import get_config
from tipcalc.middleware import safe_handler
from tipcalc.services import TipScreenState, render
from tipcalc.utils import resolve_locale

logger = structlog.get_logger(__name__)

tip_bp = Blueprint('tip', __name__)


def _request_locale(fields: Mapping[str, Any]) -> str:
    """Explicit locale field first, then Accept-Language, then the default."""
    calculator_config = get_config().calculator
    default = calculator_config.effective_locale

    explicit = fields.get('locale')
    if explicit:
        return resolve_locale(str(explicit), default)

    best = request.accept_languages.best_match(calculator_config.supported_locales)
    return resolve_locale(best, default)


def _request_fields() -> Mapping[str, Any]:
    if request.method != 'POST':
        return request.args

    data = request.get_json(silent=True)
    if data is None and request.get_data():
        raise ValueError("Request body must be valid JSON")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


@tip_bp.route('/', methods=['GET'])
@safe_handler
def screen():
    """
    Render the tip screen.

    Field values come from the query string so every change can be
    re-submitted and re-rendered.
    """
    fields = request.args
    view = render(TipScreenState.from_fields(fields), locale=_request_locale(fields))
    return render_template('tip.html', view=view)


@tip_bp.route('/api/tip', methods=['GET', 'POST'])
@safe_handler
def calculate_tip():
    """
    Calculate tip and total.

    Accepts amount, tip_percent, custom_tip, round_up and locale as query
    parameters (GET) or a JSON object (POST). Malformed numbers fall back
    to defaults and never produce an error.
    """
    fields = _request_fields()
    view = render(TipScreenState.from_fields(fields), locale=_request_locale(fields))
    return jsonify(view.to_dict())
