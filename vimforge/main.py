"""
vimforge — CLI entrypoint.

Usage:
    vimforge --help
    vimforge generate keymap '<leader>ff' ':Telescope find_files<CR>'
    vimforge web
    vimforge config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from vimforge import __version__
from vimforge.core.observability.logging_config import resolve_level, setup_from_env


@click.group()
@click.version_option(version=__version__, prog_name="vimforge")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to vimforge.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """vimforge — generate Vim / Neovim configuration snippets."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.group()
def config() -> None:
    """Settings file commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate vimforge.yml."""
    from vimforge.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        defaults = result.settings.defaults
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File:     {result.config_path or '(defaults)'}")
        click.echo(f"   Dialect:  {defaults.dialect.value}")
        click.echo(f"   Managers: {defaults.lua_manager.value} / {defaults.vimscript_manager.value}")
        click.echo(f"   Scope:    {defaults.scope}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings and not ctx.obj.get("quiet"):
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


@cli.command()
@click.option("--host", default=None, help="Bind address (default: from vimforge.yml).")
@click.option("--port", "-p", default=None, type=int, help="Port number.")
@click.pass_context
def web(ctx: click.Context, host: str | None, port: int | None) -> None:
    "Start the web form dashboard."
    from vimforge.core.config.loader import ConfigError, load_settings
    from vimforge.ui.web.server import create_app, run_server

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    host = host or settings.web.host
    port = port or settings.web.port

    app = create_app(settings=settings, config_path=config_path)

    debug = ctx.obj.get("debug", False)

    click.echo()
    click.secho("⚡ vimforge — Web Dashboard", bold=True)
    click.echo(f"   Dashboard: http://{host}:{port}")
    click.echo(f"   Dialect:   {settings.defaults.dialect.value}")
    if debug:
        click.secho("   Logging: DEBUG (all output)", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=debug)


# ── Register sub-command groups from vimforge/ui/cli/ ─────────────

from vimforge.ui.cli.generate import generate

cli.add_command(generate)


if __name__ == "__main__":
    cli()
