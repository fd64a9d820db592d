"""
Domain models — Pydantic types for snippet generation.

All models are re-exported here for convenient access:

    from vimforge.core.models import GenerationRequest, GenerationResult
"""

from vimforge.core.models.settings import GenerationDefaults, Settings, WebSettings
from vimforge.core.models.snippet import (
    FIELD_MODELS,
    MANAGERS_BY_DIALECT,
    AutocmdFields,
    Category,
    Dialect,
    GenerationRequest,
    GenerationResult,
    KeymapFields,
    OptionFields,
    PluginFields,
    PluginManager,
)

__all__ = [
    "FIELD_MODELS",
    "MANAGERS_BY_DIALECT",
    "AutocmdFields",
    "Category",
    "Dialect",
    "GenerationDefaults",
    "GenerationRequest",
    "GenerationResult",
    "KeymapFields",
    "OptionFields",
    "PluginFields",
    "PluginManager",
    "Settings",
    "WebSettings",
]
