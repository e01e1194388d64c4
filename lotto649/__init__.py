"""Flask application package."""

from __future__ import annotations

from typing import Any, Mapping

from dotenv import load_dotenv
from flask import Flask


def create_app(config_overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        config_overrides: values applied on top of the environment config.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotto649.config import get_config
    from lotto649.error_handlers import register_error_handlers
    from lotto649.logging_config import configure_logging
    from lotto649.routes.admin import admin_bp
    from lotto649.routes.analysis import analysis_bp
    from lotto649.routes.draws import draws_bp
    from lotto649.routes.health import health_bp
    from lotto649.routes.predictions import predictions_bp
    from lotto649.routes.web import web_bp
    from lotto649.state import init_state
    from lotto649.utils.formatting import format_timestamp, join_numbers

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    init_state(app)
    register_error_handlers(app)

    app.add_template_filter(join_numbers, "join_numbers")
    app.add_template_filter(format_timestamp, "format_timestamp")

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(draws_bp, url_prefix="/api")
    app.register_blueprint(analysis_bp, url_prefix="/api")
    app.register_blueprint(predictions_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/api")

    return app
