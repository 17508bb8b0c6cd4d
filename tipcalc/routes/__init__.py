"""
Tip Calculator Routes Package
Route blueprints.
"""

from tipcalc.routes.health import health_bp
from tipcalc.routes.tip import tip_bp

__all__ = ['health_bp', 'tip_bp']
