"""
Autocmd generator — ``nvim_create_autocmd`` blocks and ``autocmd`` lines.

A Lua command written as ``lua <code>`` becomes an inline callback;
anything else is passed to Neovim as an Ex command string.
"""

from __future__ import annotations

from vimforge.core.models.snippet import AutocmdFields
from vimforge.core.services.generators.common import escape_lua, lua_identifier

LUA_CALL_PREFIX = "lua "


def autocmd_lua(fields: AutocmdFields) -> str:
    lines: list[str] = []
    group_var = ""

    if fields.group:
        group_var = lua_identifier(fields.group)
        lines.append(f"-- Augroup: {fields.group}")
        lines.append(
            f"local {group_var} = vim.api.nvim_create_augroup('{fields.group}', "
            "{ clear = true })"
        )

    lines.append(f"vim.api.nvim_create_autocmd('{fields.event}', {{")
    if group_var:
        lines.append(f"  group = {group_var},")
    lines.append(f"  pattern = '{escape_lua(fields.pattern)}',")

    command = fields.command.strip()
    if command.startswith(LUA_CALL_PREFIX):
        lines.append("  callback = function()")
        lines.append(f"    {command[len(LUA_CALL_PREFIX):]}")
        lines.append("  end,")
    else:
        lines.append(f"  command = '{escape_lua(fields.command)}',")

    lines.append("})")
    return "\n".join(lines)


def autocmd_vimscript(fields: AutocmdFields) -> str:
    line = f"autocmd {fields.event} {fields.pattern} {fields.command}"
    if not fields.group:
        return line
    return "\n".join([
        f"augroup {fields.group}",
        "  autocmd!",
        f"  {line}",
        "augroup END",
    ])
