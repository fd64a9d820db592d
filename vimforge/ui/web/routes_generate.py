"""
Generate routes — form schema and snippet generation endpoints.

Blueprint: generate_bp
Prefix: /api

Thin HTTP wrappers over ``vimforge.core.services.snippet_ops``.

Endpoints:
    GET  /schema    — fields per category, dialects, managers, defaults
    POST /generate  — {category, dialect, fields} → generated snippet
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from vimforge.core.services import form_schema, snippet_ops

generate_bp = Blueprint("generate", __name__)


@generate_bp.route("/schema")
def schema():  # type: ignore[no-untyped-def]
    """Form description plus the configured defaults."""
    defaults = current_app.config["SETTINGS"].defaults
    data = form_schema.form_schema()
    data["defaults"] = defaults.model_dump(mode="json")
    return jsonify(data)


@generate_bp.route("/generate", methods=["POST"])
def generate():  # type: ignore[no-untyped-def]
    """Validate presence of required fields, then generate the snippet."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"ok": False, "error_message": "Expected a JSON object"}), 400

    category = data.get("category", "")
    fields = data.get("fields") or {}
    if not isinstance(fields, dict):
        return jsonify({"ok": False, "error_message": "'fields' must be an object"}), 400

    errors = form_schema.validate_form(category, fields)
    if errors:
        return jsonify({"ok": False, "errors": errors}), 400

    dialect = data.get("dialect") or current_app.config["SETTINGS"].defaults.dialect.value
    result = snippet_ops.generate({
        "category": category,
        "dialect": dialect,
        "fields": fields,
    })

    if not result.ok:
        return jsonify(result.to_dict()), 400
    return jsonify(result.to_dict())
