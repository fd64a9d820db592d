"""
Plugin generator — registration blocks for lazy.nvim, packer, vim-plug and dein.

Each manager has its own template.  A manager that does not belong to
the requested dialect (or is unknown) degrades to a comment naming
the plugin rather than an error.
"""

from __future__ import annotations

from vimforge.core.models.snippet import Dialect, PluginFields, PluginManager
from vimforge.core.services.generators.common import (
    comment_line,
    derive_module_name,
    escape_lua,
    escape_vimscript,
    split_dependencies,
)


def _setup_function(fields: PluginFields) -> str:
    """The ``config = function() ... end`` field shared by both Lua managers."""
    setup = fields.setup_config.strip() or "{}"
    module = derive_module_name(fields.plugin_name)
    return (
        "  config = function()\n"
        f"    require('{module}').setup({setup})\n"
        "  end"
    )


def _lazy_nvim(fields: PluginFields) -> str:
    entries = [f"  '{escape_lua(fields.plugin_name)}'"]

    deps = split_dependencies(fields.dependencies)
    if deps:
        dep_lines = ",\n".join(f"    '{escape_lua(dep)}'" for dep in deps)
        entries.append(f"  dependencies = {{\n{dep_lines}\n  }}")

    if fields.is_optional:
        entries.append("  lazy = true")

    if fields.add_config:
        entries.append(_setup_function(fields))

    return "{\n" + ",\n".join(entries) + "\n}"


def _packer(fields: PluginFields) -> str:
    entries = [f"  '{escape_lua(fields.plugin_name)}'"]

    deps = split_dependencies(fields.dependencies)
    if deps:
        quoted = ", ".join(f"'{escape_lua(dep)}'" for dep in deps)
        entries.append(f"  requires = {{{quoted}}}")

    if fields.is_optional:
        entries.append("  opt = true")

    if fields.add_config:
        entries.append(_setup_function(fields))

    return "use {\n" + ",\n".join(entries) + "\n}"


def _vim_plug(fields: PluginFields) -> str:
    primary = f"Plug '{escape_vimscript(fields.plugin_name)}'"
    if fields.is_optional:
        primary += ", { 'on': [] } \" Lazy load"

    lines = [primary]
    lines.extend(
        f"Plug '{escape_vimscript(dep)}'" for dep in split_dependencies(fields.dependencies)
    )
    return "\n".join(lines)


def _dein(fields: PluginFields) -> str:
    # dein#add has no field for dependencies, lazy-loading or setup here
    return f"call dein#add('{escape_vimscript(fields.plugin_name)}')"


_TEMPLATES = {
    (Dialect.LUA, PluginManager.LAZY): _lazy_nvim,
    (Dialect.LUA, PluginManager.PACKER): _packer,
    (Dialect.VIMSCRIPT, PluginManager.VIM_PLUG): _vim_plug,
    (Dialect.VIMSCRIPT, PluginManager.DEIN): _dein,
}


def _render(fields: PluginFields, dialect: Dialect) -> str:
    template = _TEMPLATES.get((dialect, fields.manager.strip()))
    if template is None:
        return comment_line(f"Plugin configuration for {fields.plugin_name}", dialect)
    return template(fields)


def plugin_lua(fields: PluginFields) -> str:
    """Render a plugin spec for a Lua plugin manager."""
    return _render(fields, Dialect.LUA)


def plugin_vimscript(fields: PluginFields) -> str:
    """Render a plugin registration for a Vimscript plugin manager."""
    return _render(fields, Dialect.VIMSCRIPT)
