"""
Page routes — serves the dashboard HTML.
"""

from __future__ import annotations

from flask import Blueprint, current_app, render_template

from vimforge import __version__

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/")
def dashboard():  # type: ignore[no-untyped-def]
    """Render the snippet form."""
    settings = current_app.config["SETTINGS"]
    return render_template(
        "dashboard.html",
        default_dialect=settings.defaults.dialect.value,
        version=__version__,
    )
