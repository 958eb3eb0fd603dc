"""Flask application package."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask


def create_app(config_object: object | None = None, analysis_service: object | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Config class/object; defaults to the APP_ENV-selected one.
        analysis_service: Prebuilt LottoAnalysisService (tests inject fakes).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotto_analyzer.config import get_config
    from lotto_analyzer.error_handlers import register_error_handlers
    from lotto_analyzer.logging_config import configure_logging
    from lotto_analyzer.routes.health import health_bp
    from lotto_analyzer.routes.lotto import lotto_bp
    from lotto_analyzer.services.lotto_analysis_service import LottoAnalysisService

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    configure_logging(app)
    register_error_handlers(app)

    app.extensions["lotto_analysis_service"] = analysis_service or LottoAnalysisService.from_config(app.config)

    app.register_blueprint(health_bp)
    app.register_blueprint(lotto_bp)

    return app
