"""Command-line interface for Tab Transposer.

Provides commands for:
- transpose: Rewrite the chords of a tab in a new key
- chords: List the chords recognized in a tab
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import InvalidKeyError, Key
from .core.constants import (
    DEFAULT_SENTINEL,
    PASTE_TEXT,
    RESULT_RULE,
    RESULT_TEXT,
    TARGET_KEY_TEXT,
    WELCOME_TEXT,
)

app = typer.Typer(
    name="tab-transposer",
    help="Transpose the chords of a plain-text tab to a new key",
    rich_markup_mode="markdown",
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_key(name: Optional[str], question: str) -> Key:
    """Build a key from an option value, or ask for one if it is missing."""
    from .input import prompt_for_key

    if name is None:
        return prompt_for_key(question, console=console)
    try:
        return Key.from_name(name)
    except InvalidKeyError:
        console.print(f"[red]Error: Not a valid key: {name!r}[/red]")
        raise typer.Exit(1)


def _read_tab(input_file: Optional[Path], announce: bool) -> str:
    """Read a tab from a file, or from stdin up to the sentinel line."""
    from .input import read_until_sentinel

    if input_file is not None:
        if not input_file.exists():
            console.print(f"[red]Error: File not found: {input_file}[/red]")
            raise typer.Exit(1)
        return input_file.read_text()

    if announce:
        console.print()
        console.print(PASTE_TEXT.format(sentinel=DEFAULT_SENTINEL), highlight=False)
    return read_until_sentinel(sys.stdin)


@app.command()
def transpose(
    input_file: Optional[Path] = typer.Argument(
        None, help="Tab text file. Reads stdin up to a line 'end' if omitted"
    ),
    from_key: Optional[str] = typer.Option(
        None, "--from", "-f", help="Tonic of the original key (e.g. A, Bb, F#)"
    ),
    to_key: Optional[str] = typer.Option(
        None, "--to", "-t", help="Tonic of the key to transpose to"
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the transposed tab to this file"
    ),
    legacy_slash: bool = typer.Option(
        False, "--legacy-slash", help="Reproduce the original slash-chord slicing"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Transpose every chord line of a tab. Missing keys are asked for.

    **Examples:**

        tab-transposer transpose

        tab-transposer transpose song.txt --from A --to C

        tab-transposer transpose song.txt -f G -t Bb -o song_bb.txt
    """
    from .processing import TabTransposer, TransposeConfig

    _configure_logging(verbose)

    if json_output and (from_key is None or to_key is None):
        console.print("[red]Error: --json needs both --from and --to[/red]")
        raise typer.Exit(1)

    old_key = _resolve_key(from_key, WELCOME_TEXT)
    if to_key is None:
        console.print()
    new_key = _resolve_key(to_key, TARGET_KEY_TEXT)

    text = _read_tab(input_file, announce=not json_output)

    transposer = TabTransposer(
        old_key,
        new_key,
        config=TransposeConfig(legacy_slash_offsets=legacy_slash),
    )
    result, stats = transposer.transpose(text, return_stats=True)

    if verbose and not json_output:
        console.print(
            f"  {old_key.display_name} -> {new_key.display_name} "
            f"(+{transposer.interval} semitones): "
            f"{stats.chords_transposed} chords on {stats.chord_lines} of "
            f"{stats.total_lines} lines",
            highlight=False,
        )

    if json_output:
        data = {
            "old_key": old_key.display_name,
            "new_key": new_key.display_name,
            "interval": transposer.interval,
            "stats": {
                "total_lines": stats.total_lines,
                "chord_lines": stats.chord_lines,
                "chords_transposed": stats.chords_transposed,
                "tokens_skipped": stats.tokens_skipped,
            },
            "text": result,
        }
        console.print_json(data=data)
    elif output is not None:
        output.write_text(result)
        console.print(f"[green]Transposed tab written to:[/green] {output}")
    else:
        console.print(f"\n\n{RESULT_RULE}\n", highlight=False)
        console.print(RESULT_TEXT, highlight=False)
        console.print(f"\n{RESULT_RULE}\n", highlight=False)
        typer.echo(result)


@app.command()
def chords(
    input_file: Optional[Path] = typer.Argument(
        None, help="Tab text file. Reads stdin up to a line 'end' if omitted"
    ),
    from_key: Optional[str] = typer.Option(
        None, "--from", "-f", help="Tonic of the original key"
    ),
    to_key: Optional[str] = typer.Option(
        None, "--to", "-t", help="Tonic of the key to transpose to"
    ),
):
    """List the chords recognized on each chord line of a tab."""
    from .grammar import parse_chord
    from .processing import is_chord_line, split_lines
    from .transposition import Transposer

    if (from_key is None) != (to_key is None):
        console.print("[red]Error: Give both --from and --to, or neither[/red]")
        raise typer.Exit(1)

    transposer = None
    if from_key is not None:
        transposer = Transposer(
            _resolve_key(from_key, WELCOME_TEXT),
            _resolve_key(to_key, TARGET_KEY_TEXT),
        )

    text = _read_tab(input_file, announce=False)

    table = Table(title="Recognized Chords")
    table.add_column("Line", style="dim")
    table.add_column("Chord", style="cyan")
    table.add_column("Root", style="green")
    table.add_column("Quality", style="yellow")
    table.add_column("Bass", style="magenta")
    if transposer is not None:
        table.add_column(f"In {transposer.new_key.display_name}", style="bold")

    count = 0
    for number, line in enumerate(split_lines(text), start=1):
        if not is_chord_line(line):
            continue
        for word in line.split():
            token = parse_chord(word)
            if token is None:
                continue
            count += 1
            row = [str(number), word, token.root, token.quality, token.bass or ""]
            if transposer is not None:
                row.append(transposer.transpose(word))
            table.add_row(*row)

    if count == 0:
        console.print("[yellow]No chord lines found[/yellow]")
        return
    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
