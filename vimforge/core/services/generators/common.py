"""
Shared helpers for the category generators — escaping and value shaping.
"""

from __future__ import annotations

import re

from vimforge.core.models.snippet import Dialect

# Lua numeric literals: decimal with optional fraction / exponent, or hex.
# A leading "+" is not valid Lua, so it stays a string.
_NUMBER_RE = re.compile(
    r"^-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
    r"|^-?0[xX][0-9a-fA-F]+$"
)

_LUA_IDENT_RE = re.compile(r"[^A-Za-z0-9_]")

_LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for", "function",
    "goto", "if", "in", "local", "nil", "not", "or", "repeat", "return",
    "then", "true", "until", "while",
})


def escape_lua(text: str) -> str:
    """Escape text for a single-quoted Lua string literal."""
    return text.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")


def escape_vimscript(text: str) -> str:
    """Escape text for a single-quoted Vimscript string literal.

    Vimscript literal strings have no backslash escapes; the only
    special character is the quote itself, written twice.
    """
    return text.replace("'", "''")


def is_numeric(value: str) -> bool:
    """True when ``value`` (whitespace stripped) is a Lua number literal."""
    return bool(_NUMBER_RE.match(value.strip()))


def coerce_lua_value(value: str) -> str:
    """Render a form value as a Lua expression.

    Rules, first match wins:
        1. ``true`` / ``false``       → boolean literal
        2. numeric literal            → number, whitespace stripped
        3. starts with ``{`` or ``[`` → pre-formatted composite, verbatim
        4. anything else              → quoted, escaped string
    """
    if value in ("true", "false"):
        return value
    if is_numeric(value):
        return value.strip()
    if value.strip().startswith(("{", "[")):
        return value
    return f"'{escape_lua(value)}'"


def split_dependencies(raw: str) -> list[str]:
    """Split a comma-separated dependency list, dropping blanks."""
    return [dep.strip() for dep in raw.split(",") if dep.strip()]


def derive_module_name(plugin_name: str) -> str:
    """Guess the ``require()`` name of a plugin from its identifier.

    ``nvim-telescope/telescope.nvim`` → ``telescope``,
    ``neovim/nvim-lspconfig`` → ``lspconfig``.
    """
    segment = plugin_name.rstrip("/").split("/")[-1]
    return segment.removesuffix(".nvim").removeprefix("nvim-")


def lua_identifier(name: str) -> str:
    """Turn an arbitrary name into a usable Lua local variable name."""
    ident = _LUA_IDENT_RE.sub("_", name.strip()) or "_"
    if ident[0].isdigit():
        ident = f"_{ident}"
    if ident in _LUA_KEYWORDS:
        ident = f"{ident}_"
    return ident


def comment_line(text: str, dialect: Dialect) -> str:
    """One-line comment in the dialect's syntax; newlines are flattened."""
    flat = " ".join(text.splitlines())
    marker = "--" if dialect is Dialect.LUA else '"'
    return f"{marker} {flat}"
