"""
Command-line interface for the Keyword Density Optimizer.

Optimizes text from a file or the command line and prints the result with
keywords highlighted, followed by per-keyword occurrence tables.
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_LIMITS
from .highlight import find_keyword_spans
from .models import KeywordStat, OptimizationResult
from .optimizer import OptimizationError, optimize

console = Console()

SPAN_STYLES = {
    "primary": "bold magenta",
    "secondary": "bold cyan",
}


@click.command()
@click.option(
    "--text",
    "-t",
    type=str,
    help="Content to optimize.",
)
@click.option(
    "--content-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a text file with the content to optimize.",
)
@click.option(
    "--primary",
    "-p",
    "primary_keywords",
    multiple=True,
    help="Primary keyword (repeatable).",
)
@click.option(
    "--secondary",
    "-s",
    "secondary_keywords",
    multiple=True,
    help="Secondary keyword (repeatable).",
)
@click.option(
    "--primary-frequency",
    type=float,
    default=DEFAULT_LIMITS.default_primary_frequency,
    show_default=True,
    help="Target density per primary keyword, in percent.",
)
@click.option(
    "--secondary-frequency",
    type=float,
    default=DEFAULT_LIMITS.default_secondary_frequency,
    show_default=True,
    help="Target density per secondary keyword, in percent.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducible keyword placement.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the optimized content to this file.",
)
@click.option(
    "--no-highlight",
    is_flag=True,
    default=False,
    help="Print the optimized content without keyword highlighting.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    text: Optional[str],
    content_file: Optional[Path],
    primary_keywords: tuple[str, ...],
    secondary_keywords: tuple[str, ...],
    primary_frequency: float,
    secondary_frequency: float,
    seed: Optional[int],
    output: Optional[Path],
    no_highlight: bool,
    verbose: bool,
) -> None:
    """
    Keyword Density Optimizer - Work keywords into content at a target density.

    Examples:

        keyword-optimize -f article.txt -p "running shoes" -s trail -s comfort

        keyword-optimize -t "Some text to optimize." -p widget --seed 42 -o out.txt
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    if not text and not content_file:
        console.print("[red]Error:[/red] Must provide either --text or --content-file")
        sys.exit(1)

    if text and content_file:
        console.print("[red]Error:[/red] Provide only one of --text or --content-file")
        sys.exit(1)

    rng = random.Random(seed) if seed is not None else None

    try:
        content = text if text else content_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read {content_file}: {e}")
        sys.exit(1)

    try:
        result = optimize(
            content,
            primary_keywords=list(primary_keywords),
            secondary_keywords=list(secondary_keywords),
            primary_frequency=primary_frequency,
            secondary_frequency=secondary_frequency,
            rng=rng,
        )
    except ValidationError as e:
        console.print("[red]Invalid request:[/red]")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            console.print(f"  {location}: {error['msg']}")
        sys.exit(1)
    except OptimizationError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)

    _display_result(result, list(primary_keywords), list(secondary_keywords), no_highlight)

    if output:
        output.write_text(result.optimized_content, encoding="utf-8")
        console.print(f"\n[bold green]Success![/bold green] Output saved to: {output}")


def highlight_text(
    content: str,
    primary_keywords: list[str],
    secondary_keywords: list[str],
) -> Text:
    """Build a rich Text with primary and secondary keywords styled."""
    rendered = Text(content)
    for span in find_keyword_spans(content, primary_keywords, secondary_keywords):
        rendered.stylize(SPAN_STYLES[span.kind], span.start, span.end)
    return rendered


def _stats_table(title: str, stats: list[KeywordStat]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Keyword", style="green")
    table.add_column("Occurrences", justify="right")
    table.add_column("Density", justify="right", style="cyan")
    for stat in stats:
        table.add_row(stat.keyword, str(stat.occurrences), f"{stat.density:.2f}%")
    return table


def _display_result(
    result: OptimizationResult,
    primary_keywords: list[str],
    secondary_keywords: list[str],
    no_highlight: bool,
) -> None:
    """Display optimized content and keyword statistics."""
    if no_highlight:
        body = Text(result.optimized_content)
    else:
        body = highlight_text(result.optimized_content, primary_keywords, secondary_keywords)

    console.print(Panel(body, title="Optimized Content", border_style="blue"))

    if result.primary_keyword_stats:
        console.print(_stats_table("Primary Keywords", result.primary_keyword_stats))
    if result.secondary_keyword_stats:
        console.print(_stats_table("Secondary Keywords", result.secondary_keyword_stats))

    console.print(
        f"\n[cyan]Word count:[/cyan] {result.word_count} "
        f"([dim]+{result.words_added} inserted[/dim])"
    )
    if result.word_count > DEFAULT_LIMITS.max_words:
        console.print(
            f"[yellow]Note:[/yellow] optimized content is over the "
            f"{DEFAULT_LIMITS.max_words} word input limit"
        )


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
