"""
Command-line interface for railchain.

Runs a chain of registered steps against a seed value:

    railchain run 5 --step multiply_by_10_if_positive --step stringify_with_prefix

Steps are looked up by name in a registry populated from the bundled sample
steps and, optionally, from a JSON manifest of ``module:attribute`` targets.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from returns.result import Failure
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..chain import describe_step, run_chain
from ..manifest import register_manifest
from ..registry import StepRegistry
from ..samples import register_samples
from . import config
from .args import create_run_config

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="railchain",
    help="Run result-propagating step chains from the command line.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    no_args_is_help=True,
)

ManifestOption = Annotated[
    Path | None,
    typer.Option(
        "--manifest",
        "-m",
        help="JSON manifest of additional steps ([name, target] entries).",
        dir_okay=False,
    ),
]
SamplesOption = Annotated[
    bool,
    typer.Option("--samples/--no-samples", help="Register the bundled sample steps."),
]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _build_registry(load_samples: bool, manifest: Path | None) -> StepRegistry:
    """Populate and freeze a registry for a single CLI invocation."""
    registry = StepRegistry()
    if load_samples:
        register_samples(registry)
    if manifest is not None:
        loaded = register_manifest(manifest, registry, replace=True)
        if isinstance(loaded, Failure):
            err_console.print(
                Panel(
                    f"[bold red]Failed to load step manifest:[/bold red]\n{escape(loaded.failure())}",
                    border_style="red",
                )
            )
            raise typer.Exit(code=2)
    registry.freeze()
    return registry


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]railchain[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Run result-propagating step chains from the command line."""


@app.command()
def run(
    seed: Annotated[str, typer.Argument(help="Seed value fed to the first step.")],
    steps: Annotated[
        list[str] | None,
        typer.Option("--step", "-s", help="Name of a registered step; repeat to chain steps."),
    ] = None,
    manifest: ManifestOption = None,
    samples: SamplesOption = True,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every step as it runs.")
    ] = False,
) -> None:
    """Run SEED through the given steps and report the final result."""
    run_config = create_run_config(
        seed=seed,
        steps=steps,
        manifest=manifest,
        load_samples=samples,
        verbose=verbose,
    )
    _configure_logging(run_config.log_level)
    registry = _build_registry(run_config.load_samples, run_config.manifest)

    result = run_chain(run_config.seed, *run_config.steps, registry=registry)

    chain_label = " → ".join(run_config.steps)
    if result.is_success():
        console.print(
            Panel(
                escape(str(result.value())),
                title=f"[bold green]Chain succeeded[/bold green] ({escape(chain_label)})",
                border_style="green",
            )
        )
        return

    console.print(
        Panel(
            f"[bold red]Chain failed:[/bold red] {escape(result.error())}",
            title=escape(chain_label),
            border_style="red",
        )
    )
    raise typer.Exit(code=config.EXIT_CHAIN_FAILED)


@app.command("steps")
def list_steps(
    manifest: ManifestOption = None,
    samples: SamplesOption = True,
) -> None:
    """List the step names available to `run`."""
    registry = _build_registry(samples, manifest)
    if not len(registry):
        console.print("[yellow]No steps registered.[/yellow]")
        return

    table = Table(title="Registered steps")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Callable")
    for name in registry:
        step = registry.resolve(name)
        table.add_row(name, f"{getattr(step, '__module__', '?')}.{describe_step(step)}")
    console.print(table)


if __name__ == "__main__":
    app()
