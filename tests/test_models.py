"""
Tests for snippet models — parsing, field records, request/result invariants.
"""

import pytest
from pydantic import ValidationError

from vimforge.core.models import (
    AutocmdFields,
    Category,
    Dialect,
    GenerationRequest,
    GenerationResult,
    KeymapFields,
    OptionFields,
    PluginFields,
)


class TestEnums:
    def test_category_parse_is_case_insensitive(self):
        assert Category.parse("keymap") is Category.KEYMAP
        assert Category.parse("AUTOCMD") is Category.AUTOCMD
        assert Category.parse(" Option ") is Category.OPTION

    def test_category_parse_unknown(self):
        assert Category.parse("Colorscheme") is None
        assert Category.parse(None) is None

    def test_dialect_parse(self):
        assert Dialect.parse("Lua") is Dialect.LUA
        assert Dialect.parse("vimscript") is Dialect.VIMSCRIPT
        assert Dialect.parse("fennel") is None


class TestKeymapFields:
    def test_defaults(self):
        f = KeymapFields(lhs="jk", rhs="<Esc>")
        assert f.mode == ""
        assert f.noremap is True
        assert (f.buffer, f.silent, f.expr) == (False, False, False)

    def test_missing_required(self):
        with pytest.raises(ValidationError) as exc:
            KeymapFields.model_validate({"mode": "n"})
        missing = {e["loc"][0] for e in exc.value.errors()}
        assert missing == {"lhs", "rhs"}

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            KeymapFields(mode="q", lhs="a", rhs="b")

    def test_form_booleans(self):
        """Checkbox values arrive as strings or blanks."""
        f = KeymapFields.model_validate(
            {"lhs": "a", "rhs": "b", "silent": "on", "buffer": "", "expr": None, "noremap": "false"}
        )
        assert f.silent is True
        assert f.buffer is False
        assert f.expr is False
        assert f.noremap is False

    def test_blank_noremap_keeps_default(self):
        for blank in (None, ""):
            f = KeymapFields.model_validate({"lhs": "a", "rhs": "b", "noremap": blank})
            assert f.noremap is True

    def test_extra_keys_ignored(self):
        f = KeymapFields.model_validate({"lhs": "a", "rhs": "b", "submit": "Generate"})
        assert not hasattr(f, "submit")


class TestOtherFieldRecords:
    def test_plugin_accepts_config_type_alias(self):
        f = PluginFields.model_validate({"plugin_name": "a/b", "config_type": "packer"})
        assert f.manager == "packer"

    def test_blank_manager_falls_back_to_config_type(self):
        f = PluginFields.model_validate(
            {"plugin_name": "a/b", "manager": "", "config_type": "lazy.nvim"}
        )
        assert f.manager == "lazy.nvim"

    def test_blank_manager_without_alias_rejected(self):
        with pytest.raises(ValidationError):
            PluginFields.model_validate({"plugin_name": "a/b", "manager": "  "})

    def test_option_scope_defaults(self):
        assert OptionFields(option_name="number", option_value="true").scope == "opt"
        f = OptionFields.model_validate({"option_name": "number", "option_value": "true", "scope": ""})
        assert f.scope == "opt"

    def test_option_numeric_value_becomes_text(self):
        f = OptionFields.model_validate({"option_name": "tabstop", "option_value": 4})
        assert f.option_value == "4"

    def test_option_empty_value_rejected(self):
        with pytest.raises(ValidationError):
            OptionFields(option_name="tabstop", option_value="")

    def test_autocmd_group_optional(self):
        f = AutocmdFields(event="FileType", pattern="python", command="setlocal sw=4")
        assert f.group == ""


class TestGenerationRequest:
    def test_from_raw(self):
        req = GenerationRequest.from_raw("option", "LUA", {"option_name": "wrap", "option_value": "false"})
        assert req.category is Category.OPTION
        assert req.dialect is Dialect.LUA
        assert isinstance(req.fields, OptionFields)

    def test_from_raw_unknown_category(self):
        with pytest.raises(ValueError, match="Unsupported config type: Colorscheme"):
            GenerationRequest.from_raw("Colorscheme", "lua", {})

    def test_from_raw_unknown_dialect(self):
        with pytest.raises(ValueError, match="Unsupported config language: fennel"):
            GenerationRequest.from_raw("Keymap", "fennel", {"lhs": "a", "rhs": "b"})

    def test_fields_must_match_category(self):
        with pytest.raises(ValidationError):
            GenerationRequest(
                category=Category.PLUGIN,
                dialect=Dialect.LUA,
                fields=KeymapFields(lhs="a", rhs="b"),
            )


class TestGenerationResult:
    def test_success(self):
        r = GenerationResult.success("set number", "vimscript")
        assert r.ok
        assert r.error_message == ""
        assert r.to_dict() == {
            "ok": True,
            "text": "set number",
            "error_message": "",
            "dialect": "vimscript",
        }

    def test_failure(self):
        r = GenerationResult.failure("nope")
        assert not r.ok
        assert r.text == ""

    def test_exactly_one_payload(self):
        with pytest.raises(ValidationError):
            GenerationResult(ok=True, text="x", error_message="y")
        with pytest.raises(ValidationError):
            GenerationResult(ok=True)
        with pytest.raises(ValidationError):
            GenerationResult(ok=False)
        with pytest.raises(ValidationError):
            GenerationResult(ok=False, text="x", error_message="y")

    def test_immutable(self):
        r = GenerationResult.success("x", "lua")
        with pytest.raises(ValidationError):
            r.text = "y"
