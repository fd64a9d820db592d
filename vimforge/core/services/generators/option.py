"""
Option generator — ``vim.opt`` assignments and ``set`` commands.
"""

from __future__ import annotations

from vimforge.core.models.snippet import OptionFields
from vimforge.core.services.generators.common import coerce_lua_value


def option_lua(fields: OptionFields) -> str:
    """``vim.<scope>.<name> = <value>`` with the value coerced to a Lua literal."""
    return f"vim.{fields.scope}.{fields.option_name} = {coerce_lua_value(fields.option_value)}"


def option_vimscript(fields: OptionFields) -> str:
    """``set name`` / ``set noname`` for booleans, ``set name=value`` otherwise."""
    name, value = fields.option_name, fields.option_value
    if value == "true":
        return f"set {name}"
    if value == "false":
        return f"set no{name}"
    return f"set {name}={value}"
