"""
bindgen — CLI entrypoint.

Usage:
    bindgen --help
    bindgen get --language python --provider aws@~>3.0
    bindgen config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from bindgen import __version__
from bindgen.core.observability.logging_config import LogSettings, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="bindgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to bindgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """bindgen — generate language bindings for Terraform providers and modules."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(LogSettings.from_cli(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option("--language", "-l", default=None, help="Target language (default: from config).")
@click.option("--output", "-o", default=None, help="Output directory (default: from config).")
@click.option("--provider", "providers", multiple=True, help="Provider constraint (repeatable).")
@click.option("--module", "modules", multiple=True, help="Module constraint (repeatable).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def get(
    ctx: click.Context,
    language: str | None,
    output: str | None,
    providers: tuple[str, ...],
    modules: tuple[str, ...],
    as_json: bool,
) -> None:
    """Generate bindings for providers and modules."""
    from bindgen.core.use_cases.get import run_get

    result = run_get(
        config_path=ctx.obj.get("config_path"),
        language=language,
        output=output,
        providers=list(providers),
        modules=list(modules),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho("❌ Generation failed:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        assert result.language is not None  # set whenever ok
        click.secho(f"✅ Generated {result.language.value} bindings", fg="green", bold=True)
        click.echo(f"   Output: {result.output_dir}")
        for request in result.requests:
            click.echo(f"   {request.kind.capitalize()}s: {', '.join(request.names)}")


@cli.group()
def config() -> None:
    """Project configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate bindgen.yml configuration."""
    from bindgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Language: {result.config.language.value}")
        click.echo(f"   Providers: {len(result.config.providers)}")
        click.echo(f"   Modules: {len(result.config.modules)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def tools(as_json: bool) -> None:
    """Show whether the jsii toolchain can be found."""
    from bindgen.adapters.registry import default_registry

    registry = default_registry()
    status = registry.adapter_status()

    if as_json:
        click.echo(json.dumps(status, indent=2))
        return

    click.secho("🔧 Toolchain:", fg="cyan", bold=True)
    for name, info in status.items():
        adapter = registry.get(name)
        location = adapter.executable() if hasattr(adapter, "executable") else ""
        if info["available"]:
            click.secho(f"   ✓ {name:<12} {location}", fg="green")
        else:
            click.secho(f"   ✗ {name:<12} not found", fg="yellow")


@cli.command()
def languages() -> None:
    """List target languages."""
    from bindgen.core.models.language import LANGUAGES, Language

    for lang in Language:
        if lang in LANGUAGES:
            label = "direct" if lang.is_primary else "via jsii-pacmak"
            click.echo(f"  {lang.value:<12} {label}")
        else:
            click.echo(f"  {lang.value:<12} not supported yet")


if __name__ == "__main__":
    cli()
