"""
Web dashboard server — Flask app factory.

Creates and configures the Flask application for the snippet form:
a single page plus a small JSON API the page talks to.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from vimforge.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Package directory for templates
_PACKAGE_DIR = Path(__file__).parent


def create_app(
    settings: Settings | None = None,
    config_path: Path | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Loaded settings (defaults when None).
        config_path: Path the settings came from, for display only.

    Returns:
        Configured Flask application.
    """
    app = Flask(
        __name__,
        template_folder=str(_PACKAGE_DIR / "templates"),
    )

    app.config["SETTINGS"] = settings or Settings()
    app.config["CONFIG_PATH"] = str(config_path) if config_path else None
    app.config["MAX_CONTENT_LENGTH"] = 64 * 1024  # form posts only

    from vimforge.ui.web.routes_generate import generate_bp
    from vimforge.ui.web.routes_pages import pages_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(generate_bp, url_prefix="/api")

    logger.info("Web dashboard app created (config=%s)", config_path)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8000,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting dashboard on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
