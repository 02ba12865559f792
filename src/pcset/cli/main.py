"""
Main CLI application for PCSet.

Provides command-line access to pitch-class set transformations, canonical
forms, subset search and set pairing.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import get_all_config, get_config, load_config_file, save_config_file
from ..core import (
    complement,
    invert,
    normalize,
    permutate_set_pairs,
    prime,
    reduce,
    search_for_subsets,
    to_alpha,
    to_chromatic,
    transpose,
    zero,
)
from ..exceptions import PCSetError
from ..logger import apply_logging_config, set_log_level
from .errors import handle_cli_error, parse_set

console = Console()

app = typer.Typer(
    name="pcset",
    help="Pitch-class set theory toolkit: transposition, inversion, normal and prime forms",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True
)

config_app = typer.Typer(
    name="config",
    help="Inspect and save configuration"
)
app.add_typer(config_app, name="config")

ALPHA_OPTION = typer.Option(
    None,
    "--alpha/--numeric",
    "-a",
    help="Print pitch classes as 0-9, A, B (default from display.notation)"
)


def _debug_enabled(ctx: typer.Context) -> bool:
    root = ctx.find_root()
    return bool(root.meta.get("debug", False))


def format_set(pitch_classes: List[int], alpha: Optional[bool] = None) -> str:
    """Render a set for display using the configured notation."""
    if alpha is None:
        alpha = get_config('display', 'notation') == 'alpha'
    separator = get_config('display', 'separator') or ', '
    symbols = to_alpha(pitch_classes) if alpha else [str(pc) for pc in pitch_classes]
    return f"[{separator.join(symbols)}]"


def _run(ctx: typer.Context, operation: str, func, text: str, alpha: Optional[bool]) -> None:
    try:
        result = func(parse_set(text))
    except Exception as e:
        handle_cli_error(e, operation, _debug_enabled(ctx))
    console.print(format_set(result, alpha), highlight=False)


@app.command("transform")
def transform_set(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"0,3,5,6,9\""),
    transposition: int = typer.Option(0, "--transpose", "-t", help="Half steps to transpose by (Tn)"),
    inversion: bool = typer.Option(False, "--invert", "-i", help="Invert before transposing (TnI)"),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """
    Transpose and/or invert a set.
    
    Examples:
    ```
    pcset transform "0,3,5,6,9" -t 4
    pcset transform "4 7 9 A 1" --invert
    ```
    """
    def apply(pcs):
        if inversion:
            pcs = invert(pcs)
        return transpose(pcs, transposition)
    
    _run(ctx, "transform", apply, pitch_classes, alpha)


@app.command("normal")
def normal_form(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"1,4,6,7,10\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print the normal form (most compact rotation) of a set."""
    _run(ctx, "normal", normalize, pitch_classes, alpha)


@app.command("reduce")
def reduced_form(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"1,4,6,7,10\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print the normal form transposed to start on 0."""
    _run(ctx, "reduce", reduce, pitch_classes, alpha)


@app.command("prime")
def prime_form(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"1,4,6,7,10\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print the prime form of a set."""
    _run(ctx, "prime", prime, pitch_classes, alpha)


@app.command("zero")
def zero_form(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"7,10,0,1,4\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print the set transposed so its first pitch class is 0."""
    _run(ctx, "zero", zero, pitch_classes, alpha)


@app.command("complement")
def complement_set(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"0,3,5,6,9\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print the pitch classes missing from a set."""
    _run(ctx, "complement", complement, pitch_classes, alpha)


@app.command("names")
def chromatic_names(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"0,4,7\"")
):
    """Print the chromatic note names of a set."""
    try:
        names = to_chromatic(parse_set(pitch_classes))
    except Exception as e:
        handle_cli_error(e, "names", _debug_enabled(ctx))
    console.print(" ".join(names), highlight=False)


@app.command("analyze")
def analyze_set(
    ctx: typer.Context,
    pitch_classes: str = typer.Argument(..., help="Set such as \"1,4,6,7,10\""),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Show the main forms of a set in one table."""
    try:
        pcs = parse_set(pitch_classes)
        rows = [
            ("Input", pcs),
            ("Normal form", normalize(pcs)),
            ("Reduced form", reduce(pcs)),
            ("Prime form", prime(pcs)),
            ("Inversion", invert(pcs)),
            ("Complement", complement(pcs)),
        ]
    except Exception as e:
        handle_cli_error(e, "analyze", _debug_enabled(ctx))
    
    table = Table(title="Set Analysis")
    table.add_column("Form", style="cyan")
    table.add_column("Pitch classes", style="magenta")
    table.add_column("Names", style="green")
    
    for label, form in rows:
        table.add_row(label, format_set(form, alpha), " ".join(to_chromatic(form)))
    
    console.print(table)


@app.command("subsets")
def find_subsets(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Set to search in, such as \"2,3,4,6,7,9\""),
    candidates: List[str] = typer.Argument(..., help="Candidate subsets, one argument each"),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """
    Check which candidate sets are contained in a source set.
    
    Examples:
    ```
    pcset subsets "2,3,4,6,7,9" "3,0,9" "2,3,7" "4,6,9"
    ```
    """
    try:
        search_sets, results = search_for_subsets(
            parse_set(source), [parse_set(candidate) for candidate in candidates]
        )
    except Exception as e:
        handle_cli_error(e, "subsets", _debug_enabled(ctx))
    
    table = Table(title=f"Subsets of {format_set(parse_set(source), alpha)}")
    table.add_column("Candidate", style="cyan")
    table.add_column("Found", style="green")
    
    for search_set, found in zip(search_sets, results):
        table.add_row(format_set(search_set, alpha), "✓" if found else "✗")
    
    console.print(table)
    console.print(f"[bold]{sum(results)} of {len(results)} found[/bold]")


@app.command("pairs")
def set_pairs(
    ctx: typer.Context,
    sets: List[str] = typer.Argument(..., help="Sets to pair, one argument each"),
    alpha: Optional[bool] = ALPHA_OPTION
):
    """Print every ordered pair of sets whose halves differ in content."""
    try:
        pairs = permutate_set_pairs([parse_set(text) for text in sets])
    except Exception as e:
        handle_cli_error(e, "pairs", _debug_enabled(ctx))
    
    for first, second in pairs:
        console.print(f"{format_set(first, alpha)} {format_set(second, alpha)}", highlight=False)
    console.print(f"[dim]{len(pairs)} pairs[/dim]")


@config_app.command("show")
def show_config():
    """Print the active configuration as JSON."""
    console.print_json(json.dumps(get_all_config()))


@config_app.command("save")
def save_config(
    ctx: typer.Context,
    output_file: Path = typer.Argument(..., help="Destination JSON file")
):
    """Save the active configuration to a JSON file."""
    try:
        save_config_file(str(output_file))
    except OSError as e:
        handle_cli_error(e, "config save", _debug_enabled(ctx))
    console.print(f"[green]Configuration saved to: {output_file}[/green]")


@app.command("version")
def show_version():
    """Show PCSet version information."""
    from .. import __version__
    
    console.print(Panel.fit(
        f"[bold]PCSet Version {__version__}[/bold]\n"
        f"Pitch-class set theory toolkit\n"
        f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        border_style="blue"
    ))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all log output except errors"
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed error traces"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to JSON configuration file",
        exists=True,
        file_okay=True,
        dir_okay=False
    )
):
    """
    PCSet: pitch-class set theory toolkit
    
    Sets are written as pitch classes separated by commas or spaces, using
    0-9 and A, B, C for 10, 11, 12.
    
    \b
    Quick Start:
    1. Transpose:      pcset transform "0,3,5,6,9" -t 4
    2. Normal form:    pcset normal "1,4,6,7,A"
    3. Prime form:     pcset prime "1,4,6,7,A"
    4. Subset search:  pcset subsets "2,3,4,6,7,9" "2,3,7" "1,5,8"
    """
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet
    ctx.meta["debug"] = debug
    
    if config_file:
        try:
            load_config_file(str(config_file))
        except PCSetError as e:
            handle_cli_error(e, "config loading", debug)
        apply_logging_config()
    
    # Command line flags win over the config file
    if quiet:
        set_log_level('ERROR')
    elif verbose or debug:
        set_log_level('DEBUG')


def cli_main():
    """Main entry point for CLI with error handling."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
