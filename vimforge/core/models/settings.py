"""
Settings model — user defaults read from vimforge.yml.

Every key is optional; an absent file means all defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vimforge.core.models.snippet import MANAGERS_BY_DIALECT, Dialect, OptionScope, PluginManager


def _check_manager(value: PluginManager, dialect: Dialect) -> PluginManager:
    allowed = MANAGERS_BY_DIALECT[dialect]
    if value not in allowed:
        names = ", ".join(m.value for m in allowed)
        raise ValueError(f"{value.value} is not a {dialect.value} plugin manager (expected {names})")
    return value


class GenerationDefaults(BaseModel):
    """Values pre-selected in the form and used by CLI flags left unset."""

    model_config = ConfigDict(extra="forbid")

    dialect: Dialect = Dialect.LUA
    lua_manager: PluginManager = PluginManager.LAZY
    vimscript_manager: PluginManager = PluginManager.VIM_PLUG
    scope: OptionScope = "opt"

    @field_validator("lua_manager")
    @classmethod
    def _lua_manager(cls, value: PluginManager) -> PluginManager:
        return _check_manager(value, Dialect.LUA)

    @field_validator("vimscript_manager")
    @classmethod
    def _vimscript_manager(cls, value: PluginManager) -> PluginManager:
        return _check_manager(value, Dialect.VIMSCRIPT)

    def manager_for(self, dialect: Dialect) -> PluginManager:
        """Default plugin manager for a dialect."""
        return self.lua_manager if dialect is Dialect.LUA else self.vimscript_manager


class WebSettings(BaseModel):
    """Bind address of the dashboard."""

    model_config = ConfigDict(extra="forbid")

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class Settings(BaseModel):
    """Root of vimforge.yml."""

    model_config = ConfigDict(extra="forbid")

    defaults: GenerationDefaults = Field(default_factory=GenerationDefaults)
    web: WebSettings = Field(default_factory=WebSettings)
