"""stressgen command-line interface (Click).

Commands:
  stressgen plan MODULE:CLASS       list the ordered setter plan
  stressgen populate MODULE:CLASS   build one instance and report per property
"""

from __future__ import annotations

import importlib
import os
import sys

import click

from stressgen import __version__
from stressgen.config.settings import Settings
from stressgen.container import create_container
from stressgen.core.exceptions import StressGenError


def _load_class(target: str, app_dir: str = ".") -> type:
    path = os.path.abspath(app_dir)
    if path not in sys.path:
        sys.path.insert(0, path)

    module_name, _, class_path = target.partition(":")
    if not module_name or not class_path:
        raise click.BadParameter("expected MODULE:CLASS", param_hint="TARGET")
    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import '{module_name}': {e}", param_hint="TARGET") from e
    for part in class_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise click.BadParameter(f"'{class_path}' not found in '{module_name}'", param_hint="TARGET") from e
    if not isinstance(obj, type):
        raise click.BadParameter(f"'{target}' is not a class", param_hint="TARGET")
    return obj


@click.group()
@click.version_option(version=__version__, prog_name="stressgen")
@click.option("--log-level", default=None, help="Override STRESSGEN_LOG_LEVEL.")
@click.option(
    "--app-dir",
    default=".",
    show_default=True,
    help="Directory prepended to the module search path before importing TARGET.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, app_dir: str) -> None:
    """Populate arbitrary Python objects with generated test data."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["app_dir"] = app_dir


def _settings(ctx: click.Context, **overrides) -> Settings:
    if ctx.obj.get("log_level"):
        overrides["log_level"] = ctx.obj["log_level"]
    return Settings(**overrides)


@cli.command()
@click.argument("target")
@click.pass_context
def plan(ctx: click.Context, target: str) -> None:
    """Show the setters that would populate TARGET, in order."""
    cls = _load_class(target, ctx.obj.get("app_dir", "."))
    container = create_container(_settings(ctx))
    try:
        setters = container.plan(cls)
    except StressGenError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"Plan for {cls.__qualname__}: {len(setters)} setter(s)")
    for index, setter in enumerate(setters, 1):
        click.echo(
            f"  {index:>3}. {setter.identity:<40} "
            f"{setter.kind.value:<10} {setter.affected_class.__qualname__}"
        )


@cli.command()
@click.argument("target")
@click.option("--seed", type=int, default=None, help="Seed for reproducible values.")
@click.pass_context
def populate(ctx: click.Context, target: str, seed: int | None) -> None:
    """Create one TARGET instance and report each property."""
    cls = _load_class(target, ctx.obj.get("app_dir", "."))
    overrides = {"seed": seed} if seed is not None else {}
    container = create_container(_settings(ctx, **overrides))
    try:
        instance, report = container.objects.generate(cls)
    except StressGenError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"Populated {report.target}")
    for outcome in report.outcomes:
        line = f"  [{outcome.status.value}] {outcome.identity}"
        if outcome.error and not outcome.succeeded:
            line += f"  ({outcome.error})"
        click.echo(line)
    click.echo(f"Applied: {len(report.applied)}  Skipped: {len(report.skipped)}")
    click.echo(repr(instance))


if __name__ == "__main__":
    cli()
