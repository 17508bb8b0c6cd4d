"""
Tip Calculator Flask Application
Application factory for the tip screen and JSON API.
"""

import logging
import sys
from flask import Flask, g
from flask_cors import CORS
import structlog

from tipcalc.config import get_config, validate_config
from tipcalc.middleware import register_error_handlers
from tipcalc.routes import health_bp, tip_bp
from tipcalc.utils import generate_request_id

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)


def create_app() -> Flask:
    """
    Flask application factory.

    WHY factory pattern: tests build apps with their own environment
    after clearing the cached configuration.
    """
    config = get_config()

    # Validate configuration
    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.critical("Configuration error", error=error)
        if config.is_production:
            sys.exit(1)

    level = logging.getLevelName(config.log_level)
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stdout,
        level=level if isinstance(level, int) else logging.INFO
    )

    # Create Flask app
    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.secret_key or 'dev-only-secret-key'

    # CORS for the JSON API only
    CORS(app, resources={r'/api/*': {'origins': config.cors_origins}})

    register_error_handlers(app)

    # Request hooks
    @app.before_request
    def before_request():
        """Set up request context."""
        g.request_id = generate_request_id()

    @app.after_request
    def after_request(response):
        """Add security and tracking headers."""
        response.headers['X-Request-ID'] = g.get('request_id', 'unknown')
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response

    # Register blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(tip_bp)

    logger.info(
        "Application initialized",
        env=config.env,
        debug=config.debug,
        default_locale=config.calculator.default_locale
    )

    return app


def main() -> None:
    """Run the development server."""
    config = get_config()
    create_app().run(
        host=config.host,
        port=config.port,
        debug=config.debug
    )


if __name__ == '__main__':
    main()
