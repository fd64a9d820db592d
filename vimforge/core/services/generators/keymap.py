"""
Keymap generator — ``vim.keymap.set`` calls and ``*map`` commands.
"""

from __future__ import annotations

from vimforge.core.models.snippet import Dialect, KeymapFields
from vimforge.core.services.generators.common import comment_line, escape_lua


def keymap_lua(fields: KeymapFields) -> str:
    """Render a keymap as a ``vim.keymap.set(...)`` call.

    ``vim.keymap.set`` is non-recursive by default, so only a
    recursive mapping needs an explicit ``remap = true``.
    """
    opts: list[str] = []
    if fields.description:
        opts.append(f"desc = '{escape_lua(fields.description)}'")
    if not fields.noremap:
        opts.append("remap = true")
    if fields.buffer:
        opts.append("buffer = true")
    if fields.silent:
        opts.append("silent = true")
    if fields.expr:
        opts.append("expr = true")

    opts_str = f"{{ {', '.join(opts)} }}" if opts else "{}"

    lines = []
    if fields.description:
        lines.append(comment_line(fields.description, Dialect.LUA))
    lines.append(
        f"vim.keymap.set('{fields.mode}', '{escape_lua(fields.lhs)}', "
        f"'{escape_lua(fields.rhs)}', {opts_str})"
    )
    return "\n".join(lines)


def keymap_vimscript(fields: KeymapFields) -> str:
    """Render a keymap as an ``nnoremap``-style command line."""
    cmd = fields.mode + ("noremap" if fields.noremap else "map")

    # Map arguments must come in this order, before the lhs
    if fields.silent:
        cmd += " <silent>"
    if fields.buffer:
        cmd += " <buffer>"
    if fields.expr:
        cmd += " <expr>"

    lines = []
    if fields.description:
        lines.append(comment_line(fields.description, Dialect.VIMSCRIPT))
    lines.append(f"{cmd} {fields.lhs} {fields.rhs}")
    return "\n".join(lines)
