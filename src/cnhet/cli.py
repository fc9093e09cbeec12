"""Command-line interface."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cnhet.core.config import SearchConfig

app = typer.Typer(help="CNHET: copy number heterogeneity, ploidy and purity inference")
console = Console()


@app.command()
def version():
    """Show CNHET version."""
    from cnhet import __version__
    console.print(f"CNHET version {__version__}")


@app.command()
def infer(
    value: List[float] = typer.Option(..., "--value", help="Relative copy number of a segment (repeat per segment)"),
    length: List[float] = typer.Option(..., "--length", "-l", help="Length of a segment (repeat per segment)"),
    ploidy: Optional[List[float]] = typer.Option(None, "--ploidy", "-p", help="Known ploidy, or repeat for candidates (default: search 1.5-5.0)"),
    purity: Optional[List[float]] = typer.Option(None, "--purity", "-u", help="Known purity, or repeat for candidates (default: search 0.2-1.0)"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Worker threads"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Infer CNH, ploidy and purity from segment values and lengths."""
    from cnhet.core.inference import infer_cnh

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = SearchConfig(n_jobs=jobs)
        cnh, ploidy_out, purity_out = infer_cnh(
            value,
            length,
            ploidy=ploidy or None,
            purity=purity or None,
            config=config,
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Copy Number Heterogeneity")
    table.add_column("CNH", style="cyan")
    table.add_column("Ploidy", style="green")
    table.add_column("Purity", style="green")
    table.add_row(f"{cnh:.4f}", f"{ploidy_out:g}", f"{purity_out:g}")
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
