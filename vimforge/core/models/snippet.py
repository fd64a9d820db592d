"""
Snippet models — the typed request / result pair of the generator.

A submission carries a category, an output dialect and a flat record
of form fields.  Each category has its own field model so a missing
required field fails at construction instead of deep inside a
template.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal, Mapping, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


class Category(StrEnum):
    """The four kinds of configuration a snippet can express."""

    KEYMAP = "Keymap"
    PLUGIN = "Plugin"
    OPTION = "Option"
    AUTOCMD = "Autocmd"

    @classmethod
    def parse(cls, value: object) -> Category | None:
        """Case-insensitive lookup; None when the value names no category."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None


class Dialect(StrEnum):
    """Output syntax of a snippet."""

    LUA = "lua"
    VIMSCRIPT = "vimscript"

    @classmethod
    def parse(cls, value: object) -> Dialect | None:
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return None


class PluginManager(StrEnum):
    """Plugin managers with a dedicated template."""

    LAZY = "lazy.nvim"
    PACKER = "packer"
    VIM_PLUG = "vim-plug"
    DEIN = "dein"


MANAGERS_BY_DIALECT: dict[Dialect, tuple[PluginManager, ...]] = {
    Dialect.LUA: (PluginManager.LAZY, PluginManager.PACKER),
    Dialect.VIMSCRIPT: (PluginManager.VIM_PLUG, PluginManager.DEIN),
}

KeymapMode = Literal["", "n", "i", "v", "x", "t", "c"]
OptionScope = Literal["opt", "o", "bo", "wo", "g"]


# ── Field records ───────────────────────────────────────────────


class _FieldRecord(BaseModel):
    """Base for per-category field records.

    Unknown keys are dropped (the form posts every input it rendered)
    and numbers are accepted where text is expected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_flags(cls, value: Any, info: ValidationInfo) -> Any:
        # Unchecked or unsent checkboxes arrive as "" or null; keep the flag's default
        field = cls.model_fields.get(info.field_name)
        if field is not None and field.annotation is bool and value in ("", None):
            return field.default
        return value


class KeymapFields(_FieldRecord):
    """A key mapping: mode, key sequence, action and modifiers."""

    mode: KeymapMode = ""
    lhs: str = Field(min_length=1)
    rhs: str = Field(min_length=1)
    description: str = ""
    noremap: bool = True
    buffer: bool = False
    silent: bool = False
    expr: bool = False

    @field_validator("mode", mode="before")
    @classmethod
    def _all_modes(cls, value: Any) -> Any:
        return "" if value is None else value


class PluginFields(_FieldRecord):
    """A plugin registration for one of the supported managers."""

    plugin_name: str = Field(min_length=1)
    manager: str = Field(min_length=1, validation_alias=AliasChoices("manager", "config_type"))
    dependencies: str = ""
    setup_config: str = ""
    add_config: bool = False
    is_optional: bool = False

    @model_validator(mode="before")
    @classmethod
    def _blank_manager_falls_back(cls, data: Any) -> Any:
        # A blank "manager" must not shadow the legacy "config_type" key
        if isinstance(data, Mapping) and "manager" in data:
            manager = data["manager"]
            if manager is None or (isinstance(manager, str) and not manager.strip()):
                data = {k: v for k, v in data.items() if k != "manager"}
        return data


class OptionFields(_FieldRecord):
    """An editor option assignment."""

    option_name: str = Field(min_length=1)
    option_value: str = Field(min_length=1)
    scope: OptionScope = "opt"

    @field_validator("scope", mode="before")
    @classmethod
    def _default_scope(cls, value: Any) -> Any:
        return "opt" if value in ("", None) else value


class AutocmdFields(_FieldRecord):
    """An autocommand, optionally inside a group."""

    event: str = Field(min_length=1)
    pattern: str = Field(min_length=1)
    command: str = Field(min_length=1)
    group: str = ""


FieldRecord = Union[KeymapFields, PluginFields, OptionFields, AutocmdFields]

FIELD_MODELS: dict[Category, type[_FieldRecord]] = {
    Category.KEYMAP: KeymapFields,
    Category.PLUGIN: PluginFields,
    Category.OPTION: OptionFields,
    Category.AUTOCMD: AutocmdFields,
}


# ── Request / result ────────────────────────────────────────────


class GenerationRequest(BaseModel):
    """One form submission, typed.

    Attributes:
        category: Which kind of snippet to build.
        dialect:  Output syntax.
        fields:   The field record matching ``category``.
    """

    model_config = ConfigDict(frozen=True)

    category: Category
    dialect: Dialect
    fields: FieldRecord

    @model_validator(mode="after")
    def _fields_match_category(self) -> GenerationRequest:
        expected = FIELD_MODELS[self.category]
        if not isinstance(self.fields, expected):
            raise ValueError(
                f"{self.category.value} requests need {expected.__name__}, "
                f"got {type(self.fields).__name__}"
            )
        return self

    @classmethod
    def from_raw(
        cls,
        category: object,
        dialect: object,
        fields: Mapping[str, Any] | None,
    ) -> GenerationRequest:
        """Build a request from untyped form data.

        Raises:
            ValueError: Unknown category or dialect.
            pydantic.ValidationError: Missing or malformed fields.
        """
        parsed_category = Category.parse(category)
        if parsed_category is None:
            raise ValueError(f"Unsupported config type: {category}")
        parsed_dialect = Dialect.parse(dialect)
        if parsed_dialect is None:
            raise ValueError(f"Unsupported config language: {dialect}")

        record = FIELD_MODELS[parsed_category].model_validate(dict(fields or {}))
        return cls(category=parsed_category, dialect=parsed_dialect, fields=record)


class GenerationResult(BaseModel):
    """Outcome of one generation call.

    Exactly one of ``text`` / ``error_message`` is populated.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    text: str = ""
    error_message: str = ""
    dialect: str = ""

    @model_validator(mode="after")
    def _single_payload(self) -> GenerationResult:
        if self.ok and (not self.text or self.error_message):
            raise ValueError("a successful result carries text and no error message")
        if not self.ok and (not self.error_message or self.text):
            raise ValueError("a failed result carries an error message and no text")
        return self

    @classmethod
    def success(cls, text: str, dialect: str) -> GenerationResult:
        return cls(ok=True, text=text, dialect=dialect)

    @classmethod
    def failure(cls, message: str, dialect: str = "") -> GenerationResult:
        return cls(ok=False, error_message=message, dialect=dialect)

    def to_dict(self) -> dict:
        return self.model_dump()
