"""
CLI commands for snippet generation — one sub-command per category.

Thin wrappers over ``vimforge.core.services.snippet_ops``.
"""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from vimforge.core.models.settings import Settings
from vimforge.core.models.snippet import Category, Dialect, PluginManager

_DIALECTS = [d.value for d in Dialect]
_MODES = ["n", "i", "v", "x", "t", "c", "all"]


def _settings(ctx: click.Context) -> Settings:
    """Load settings once per invocation; exit on a broken file."""
    if "settings" not in ctx.obj:
        from vimforge.core.config.loader import ConfigError, load_settings

        try:
            ctx.obj["settings"] = load_settings(ctx.obj.get("config_path"))
        except ConfigError as e:
            click.secho(f"❌ {e}", fg="red")
            sys.exit(1)
    return ctx.obj["settings"]


def _resolve_dialect(ctx: click.Context, dialect: str | None) -> Dialect:
    if dialect:
        return Dialect(dialect)
    return _settings(ctx).defaults.dialect


def _emit(ctx: click.Context, category: Category, dialect: Dialect, fields: dict[str, Any],
          as_json: bool) -> None:
    """Run the generator and print its result."""
    from vimforge.core.services.snippet_ops import generate

    result = generate({"category": category, "dialect": dialect, "fields": fields})

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if not result.ok:
        click.secho(f"❌ {result.error_message}", fg="red")
        sys.exit(1)

    if ctx.obj.get("verbose"):
        click.secho(f"# {category.value} ({dialect.value})", fg="cyan", err=True)
    click.echo(result.text)


dialect_option = click.option(
    "--dialect", "-d",
    type=click.Choice(_DIALECTS, case_sensitive=False),
    default=None,
    help="Output language (default: from vimforge.yml, else lua).",
)
json_option = click.option(
    "--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."
)


@click.group()
def generate() -> None:
    """Generate snippets — keymap, plugin, option, autocmd."""


@generate.command()
@click.argument("lhs")
@click.argument("rhs")
@click.option("--mode", "-m", type=click.Choice(_MODES), default="n", show_default=True,
              help="Mode the mapping applies to ('all' for every mode).")
@click.option("--desc", "description", default="", help="Description / comment.")
@click.option("--noremap/--remap", default=True, help="Non-recursive (default) or recursive.")
@click.option("--buffer", is_flag=True, help="Buffer-local mapping.")
@click.option("--silent", is_flag=True, help="Do not echo the command.")
@click.option("--expr", is_flag=True, help="The rhs is an expression.")
@dialect_option
@json_option
@click.pass_context
def keymap(
    ctx: click.Context,
    lhs: str,
    rhs: str,
    mode: str,
    description: str,
    noremap: bool,
    buffer: bool,
    silent: bool,
    expr: bool,
    dialect: str | None,
    as_json: bool,
) -> None:
    """Map LHS to RHS.

    Examples:

        vimforge generate keymap '<leader>ff' ':Telescope find_files<CR>'

        vimforge generate keymap jk '<Esc>' --mode i -d vimscript
    """
    fields = {
        "mode": "" if mode == "all" else mode,
        "lhs": lhs,
        "rhs": rhs,
        "description": description,
        "noremap": noremap,
        "buffer": buffer,
        "silent": silent,
        "expr": expr,
    }
    _emit(ctx, Category.KEYMAP, _resolve_dialect(ctx, dialect), fields, as_json)


@generate.command()
@click.argument("plugin_name")
@click.option("--manager", type=click.Choice([m.value for m in PluginManager]), default=None,
              help="Plugin manager (default: from vimforge.yml for the dialect).")
@click.option("--deps", "dependencies", default="", help="Comma-separated dependencies.")
@click.option("--setup", "setup_config", default="", help="Lua table passed to setup().")
@click.option("--with-setup", "add_config", is_flag=True, help="Emit a setup() call.")
@click.option("--lazy", "is_optional", is_flag=True, help="Lazy-load the plugin.")
@dialect_option
@json_option
@click.pass_context
def plugin(
    ctx: click.Context,
    plugin_name: str,
    manager: str | None,
    dependencies: str,
    setup_config: str,
    add_config: bool,
    is_optional: bool,
    dialect: str | None,
    as_json: bool,
) -> None:
    """Register PLUGIN_NAME (owner/repo) with a plugin manager."""
    resolved = _resolve_dialect(ctx, dialect)
    fields = {
        "plugin_name": plugin_name,
        "manager": manager or _settings(ctx).defaults.manager_for(resolved).value,
        "dependencies": dependencies,
        "setup_config": setup_config,
        "add_config": add_config or bool(setup_config.strip()),
        "is_optional": is_optional,
    }
    _emit(ctx, Category.PLUGIN, resolved, fields, as_json)


@generate.command()
@click.argument("option_name")
@click.argument("option_value")
@click.option("--scope", type=click.Choice(["opt", "o", "bo", "wo", "g"]), default=None,
              help="Lua scope table (default: from vimforge.yml, else opt).")
@dialect_option
@json_option
@click.pass_context
def option(
    ctx: click.Context,
    option_name: str,
    option_value: str,
    scope: str | None,
    dialect: str | None,
    as_json: bool,
) -> None:
    """Set OPTION_NAME to OPTION_VALUE."""
    fields = {
        "option_name": option_name,
        "option_value": option_value,
        "scope": scope or _settings(ctx).defaults.scope,
    }
    _emit(ctx, Category.OPTION, _resolve_dialect(ctx, dialect), fields, as_json)


@generate.command()
@click.argument("event")
@click.argument("pattern")
@click.argument("command")
@click.option("--group", "-g", default="", help="Augroup to create and clear.")
@dialect_option
@json_option
@click.pass_context
def autocmd(
    ctx: click.Context,
    event: str,
    pattern: str,
    command: str,
    group: str,
    dialect: str | None,
    as_json: bool,
) -> None:
    """Run COMMAND on EVENT for files matching PATTERN.

    A COMMAND starting with 'lua ' becomes a Lua callback.
    """
    fields = {"event": event, "pattern": pattern, "command": command, "group": group}
    _emit(ctx, Category.AUTOCMD, _resolve_dialect(ctx, dialect), fields, as_json)
