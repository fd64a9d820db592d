"""
Snippet generation — the single entry point used by the web UI and CLI.

``generate()`` maps a request to the generator registered for its
(category, dialect) pair and always returns a ``GenerationResult``:
rejected input and internal failures become ``ok=False`` results,
never exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from vimforge.core.models.snippet import (
    Category,
    Dialect,
    GenerationRequest,
    GenerationResult,
)
from vimforge.core.services.generators.autocmd import autocmd_lua, autocmd_vimscript
from vimforge.core.services.generators.keymap import keymap_lua, keymap_vimscript
from vimforge.core.services.generators.option import option_lua, option_vimscript
from vimforge.core.services.generators.plugin import plugin_lua, plugin_vimscript

logger = logging.getLogger(__name__)

Generator = Callable[[Any], str]

_GENERATORS: dict[tuple[Category, Dialect], Generator] = {
    (Category.KEYMAP, Dialect.LUA): keymap_lua,
    (Category.KEYMAP, Dialect.VIMSCRIPT): keymap_vimscript,
    (Category.PLUGIN, Dialect.LUA): plugin_lua,
    (Category.PLUGIN, Dialect.VIMSCRIPT): plugin_vimscript,
    (Category.OPTION, Dialect.LUA): option_lua,
    (Category.OPTION, Dialect.VIMSCRIPT): option_vimscript,
    (Category.AUTOCMD, Dialect.LUA): autocmd_lua,
    (Category.AUTOCMD, Dialect.VIMSCRIPT): autocmd_vimscript,
}


def supported_combinations() -> list[tuple[str, str]]:
    """Return every (category, dialect) pair that has a generator."""
    return [(cat.value, dia.value) for cat, dia in _GENERATORS]


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line naming each bad field."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "fields"
        if err.get("type") == "missing":
            parts.append(f"{loc} is required")
        else:
            parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid fields: " + "; ".join(parts)


# Keys of the raw payload, newest first; the older names are the
# form's legacy {configType, configLang, data} payload.
_CATEGORY_KEYS = ("category", "configType")
_DIALECT_KEYS = ("dialect", "language", "configLang")
_FIELDS_KEYS = ("fields", "data")


def _pick(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _coerce_request(request: GenerationRequest | Mapping[str, Any]) -> GenerationRequest:
    if isinstance(request, GenerationRequest):
        return request
    return GenerationRequest.from_raw(
        _pick(request, _CATEGORY_KEYS),
        _pick(request, _DIALECT_KEYS),
        _pick(request, _FIELDS_KEYS),
    )


def _raw_dialect(request: GenerationRequest | Mapping[str, Any]) -> str:
    if isinstance(request, GenerationRequest):
        return request.dialect.value
    parsed = Dialect.parse(_pick(request, _DIALECT_KEYS))
    return parsed.value if parsed else ""


def generate(request: GenerationRequest | Mapping[str, Any]) -> GenerationResult:
    """Generate a config snippet.

    Args:
        request: A ``GenerationRequest`` or a raw mapping with
            ``category``, ``dialect`` and ``fields`` keys.

    Returns:
        GenerationResult — ``ok`` with the snippet text, or not ok
        with an error message.  Never raises.
    """
    try:
        typed = _coerce_request(request)
    except ValidationError as e:
        message = describe_validation_error(e)
        logger.warning("Rejected snippet request: %s", message)
        return GenerationResult.failure(message, dialect=_raw_dialect(request))
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning("Rejected snippet request: %s", e)
        return GenerationResult.failure(str(e) or "Malformed request")

    key = (typed.category, typed.dialect)
    dialect = typed.dialect.value
    generator = _GENERATORS.get(key)
    if generator is None:
        message = f"No generator for {typed.category.value} / {dialect}"
        logger.warning(message)
        return GenerationResult.failure(message, dialect=dialect)

    try:
        text = generator(typed.fields)
        result = GenerationResult.success(text, dialect=dialect)
    except Exception as e:
        logger.exception("Snippet generation failed for %s / %s", typed.category.value, dialect)
        return GenerationResult.failure(
            f"Failed to generate {typed.category.value} snippet: {e}",
            dialect=dialect,
        )

    logger.debug("Generated %s snippet (%s, %d chars)", typed.category.value, dialect, len(text))
    return result
