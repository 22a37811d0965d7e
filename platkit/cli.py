"""Click-based CLI for platkit - target platform classification."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from platkit import __version__
from platkit.classify import (
    is_zipper_compatible,
    normalized_module_triple,
    runtime_compatibility_version,
)
from platkit.config import (
    ensure_config_exists,
    generate_default_config,
    get_config_path,
    load_config_or_default,
    load_sdk_info,
    validate_config_file,
)
from platkit.config.schema import PlatkitConfig
from platkit.errors import PreconditionError
from platkit.output.console import Console, create_console
from platkit.report import build_report
from platkit.triple.model import Triple
from platkit.version.remap import target_sdk_version


def _load(verbose: Optional[bool] = None) -> tuple[PlatkitConfig, Console]:
    """Load configuration and a console configured from it."""
    try:
        config = load_config_or_default()
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        console = create_console()
        console.print_error(f"Invalid configuration: {get_config_path()}")
        console.print(str(e), markup=False)
        sys.exit(1)
    return config, create_console(config.output, verbose=verbose)


def _parse_triple(console: Console, text: str) -> Triple:
    try:
        return Triple.parse(text)
    except ValueError as e:
        console.print_error(str(e))
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="platkit")
def cli() -> None:
    """platkit - Target platform classification for compiler toolchains.

    Classify target triples into platform names, module triples and
    minimum runtime compatibility versions.

    \b
    Examples:
      platkit classify x86_64-apple-macosx10.15
      platkit module-triple amd64-unknown-macos10.15
      platkit zipper x86_64-apple-macosx10.15 x86_64-apple-ios13.1-macabi
    """
    pass


@cli.command()
@click.argument("triple")
def classify(triple: str) -> None:
    """Show every classification of a target triple."""
    config, console = _load()
    target = _parse_triple(console, triple)

    try:
        report = build_report(target)
    except PreconditionError as e:
        console.print_error(str(e))
        sys.exit(1)

    console.print_report(report)


@cli.command("module-triple")
@click.argument("triple")
def module_triple(triple: str) -> None:
    """Print the triple used to name target-specific module files."""
    config, console = _load()
    target = _parse_triple(console, triple)
    console.print(str(normalized_module_triple(target)), highlight=False, soft_wrap=True)


@cli.command("runtime-version")
@click.argument("triple")
def runtime_version(triple: str) -> None:
    """Print the minimum runtime compatibility version, or "none"."""
    config, console = _load()
    target = _parse_triple(console, triple)
    version = runtime_compatibility_version(target)
    console.print(str(version) if version is not None else "none", highlight=False, soft_wrap=True)


@cli.command()
@click.argument("target")
@click.argument("variant")
def zipper(target: str, variant: str) -> None:
    """Check whether TARGET and VARIANT can be zippered into one binary.

    One side must be macOS and the other Mac Catalyst, with the same
    architecture and vendor. Exits with status 1 if they cannot.
    """
    config, console = _load()
    first = _parse_triple(console, target)
    second = _parse_triple(console, variant)

    if is_zipper_compatible(first, second):
        console.print_success(f"{first} and {second} can be zippered")
    else:
        console.print_warning(f"{first} and {second} cannot be zippered")
        sys.exit(1)


@cli.command("sdk-version")
@click.argument("triple")
@click.option(
    "--sdk-settings",
    type=click.Path(path_type=Path),
    default=None,
    help="SDKSettings.json to read (default: sdk.settings_path from config)",
)
def sdk_version(triple: str, sdk_settings: Optional[Path]) -> None:
    """Print the SDK version passed to the linker for a target.

    Mac Catalyst targets map the macOS SDK version to its iOS equivalent
    and print 0.0.0 when the SDK has no mapping.
    """
    config, console = _load()
    target = _parse_triple(console, triple)

    settings_path = sdk_settings
    if settings_path is None and config.sdk.settings_path:
        settings_path = Path(config.sdk.settings_path)
    if settings_path is None:
        console.print_error("No SDK settings file given (use --sdk-settings or set sdk.settings_path)")
        sys.exit(1)

    try:
        sdk_info = load_sdk_info(settings_path)
    except (FileNotFoundError, ValueError) as e:
        console.print_error(str(e))
        sys.exit(1)

    console.print(str(target_sdk_version(sdk_info, target)), highlight=False, soft_wrap=True)


@cli.command()
@click.option("--verbose", "-v", is_flag=True, default=None, help="Show module triple and rpath columns")
def report(verbose: Optional[bool]) -> None:
    """Show a classification matrix for the configured targets."""
    config, console = _load(verbose=verbose or None)

    reports = []
    for target in config.get_triples():
        try:
            reports.append(build_report(target))
        except PreconditionError as e:
            console.print_error(str(e))
            sys.exit(1)

    console.print_reports(reports)


# ============================================================================
# Configuration Commands
# ============================================================================


@cli.group()
def config() -> None:
    """Manage the platkit configuration file.

    \b
    Location: ~/.config/platkit/config.yaml
    Override: PLATKIT_CONFIG environment variable
    """
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration")
def config_init(force: bool) -> None:
    """Create a configuration file with default targets."""
    console = create_console()
    config_path = get_config_path()

    if force and config_path.exists():
        config_path.write_text(generate_default_config(), encoding="utf-8")
        console.print_success(f"Configuration overwritten: {config_path}")
        return

    config_path, created = ensure_config_exists(config_path)
    if created:
        console.print_success(f"Configuration created: {config_path}")
    else:
        console.print_info(f"Configuration already exists: {config_path}")


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config, console = _load()
    data = config.model_dump(mode="json")
    console.print(yaml.dump(data, default_flow_style=False, sort_keys=False), markup=False, highlight=False, soft_wrap=True)


@config.command("validate")
def config_validate() -> None:
    """Validate the configuration file."""
    console = create_console()
    is_valid, errors = validate_config_file()

    if is_valid:
        console.print_success("Configuration is valid")
        return

    console.print_error("Configuration is invalid:")
    for error in errors:
        console.print(f"  • {error}", markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


@config.command("path")
def config_path_cmd() -> None:
    """Print the configuration file path."""
    console = create_console()
    console.print(str(get_config_path()), highlight=False, soft_wrap=True)


if __name__ == "__main__":
    cli()
