"""Console input - Ask for keys and collect a pasted tab."""

from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.prompt import Prompt

from ..core import DEFAULT_SENTINEL, Key, is_valid_note, normalize_note


def prompt_for_key(
    question: str,
    console: Optional[Console] = None,
    ask: Callable[..., str] = Prompt.ask,
) -> Key:
    """
    Ask for a key until the answer is a valid note name.

    Only the first word of an answer is used, so "A minor" gives A.

    Args:
        question: Text shown once before the first prompt
        console: Console to print to (default: new Console)
        ask: Prompt function, called as ask(prompt, console=console)

    Returns:
        Key built from the accepted answer
    """
    console = console or Console()
    console.print(question)
    while True:
        answer = ask(">", console=console)
        words = answer.split()
        name = normalize_note(words[0]) if words else ""
        if is_valid_note(name):
            return Key.from_name(name)
        console.print(
            f"[yellow]Not a note name: {answer.strip()!r}. Try e.g. A, Bb or F#.[/yellow]",
            highlight=False,
        )


def read_until_sentinel(
    stream: Iterable[str],
    sentinel: str = DEFAULT_SENTINEL,
) -> str:
    """
    Read lines until a line equal to the sentinel or the end of the stream.

    Args:
        stream: Text lines, e.g. sys.stdin or an open file
        sentinel: Line that ends the input (not included in the result)

    Returns:
        Collected lines, each terminated by a newline
    """
    lines = []
    for raw in stream:
        line = raw.rstrip("\n")
        if line.rstrip("\r") == sentinel:
            break
        lines.append(line + "\n")
    return "".join(lines)
