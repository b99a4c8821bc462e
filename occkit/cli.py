"""
occkit CLI

Commands:
- occkit parse O:SPY251219C00650000 TSLA210903C00700000
- occkit render -u SPY -e 2025-12-19 -t call -k 650
- occkit scan tickers.txt
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List

import typer

app = typer.Typer(
    add_completion=False,
    help="""occkit — OCC option ticker codec

\b
  occkit parse TICKER...     Decode tickers into their fields
  occkit render ...          Encode fields into a canonical ticker
  occkit scan FILE           Batch-decode one ticker per line
""",
)


def _codec(letters_only: bool):
    from occkit.config import load_settings
    from occkit.options.codec import TickerCodec

    settings = load_settings()
    return TickerCodec(allow_digit_roots=settings.allow_digit_roots and not letters_only)


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Logging level (default from OCC_LOG_LEVEL)"),
):
    from occkit.config import load_settings
    from occkit.utils.logging import configure_logging

    configure_logging((log_level or load_settings().log_level).upper())


@app.command("parse")
def parse_cmd(
    tickers: List[str] = typer.Argument(..., help="OCC tickers, with or without the O: prefix"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON event per ticker"),
    letters_only: bool = typer.Option(False, "--letters-only", help="Reject digits in underlying roots"),
):
    """Decode OCC tickers."""
    from rich.console import Console
    from rich.table import Table

    from occkit.options.errors import TickerError
    from occkit.utils.formatting import fmt_date, fmt_dte, fmt_strike
    from occkit.utils.logging import log_event

    codec = _codec(letters_only)
    console = Console()

    table = Table(show_header=True, expand=False)
    table.add_column("Ticker", style="cyan")
    table.add_column("Underlying")
    table.add_column("Expiration")
    table.add_column("DTE", justify="right")
    table.add_column("Type")
    table.add_column("Strike", justify="right", style="yellow")

    failed = 0
    for t in tickers:
        try:
            c = codec.parse(t)
        except TickerError as e:
            failed += 1
            if as_json:
                log_event("occ.parse.error", {"ticker": t, "error": type(e).__name__, "detail": str(e)})
            else:
                table.add_row(t, f"[red]{type(e).__name__}[/red]", "—", "—", "—", "—")
            continue
        if as_json:
            log_event("occ.parse", {"ticker": codec.render(c), "contract": c})
        else:
            table.add_row(
                codec.render(c),
                c.underlying,
                fmt_date(c.expiration),
                fmt_dte(c.expiration),
                c.option_type.value,
                fmt_strike(c.strike),
            )

    if not as_json:
        console.print(table)
    if failed:
        raise typer.Exit(code=1)


@app.command("render")
def render_cmd(
    underlying: str = typer.Option(..., "--underlying", "-u", help="Underlying root, e.g. SPY"),
    expiration: str = typer.Option(..., "--expiration", "-e", help="Expiration date YYYY-MM-DD"),
    option_type: str = typer.Option(..., "--type", "-t", help="call/put or C/P"),
    strike: str = typer.Option(..., "--strike", "-k", help="Strike price, up to 3 decimals"),
    letters_only: bool = typer.Option(False, "--letters-only", help="Reject digits in underlying roots"),
):
    """Encode contract fields into the canonical O: ticker."""
    from occkit.options.errors import TickerError

    try:
        exp = date.fromisoformat(expiration.strip())
    except ValueError:
        typer.echo(f"Error: expiration '{expiration}' is not YYYY-MM-DD", err=True)
        raise typer.Exit(code=1)

    try:
        ticker = _codec(letters_only).create(underlying, exp, option_type, strike)
    except TickerError as e:
        typer.echo(f"Error: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(ticker)


@app.command("scan")
def scan_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one ticker per line"),
    show: int = typer.Option(30, "--show", "-n", help="Number of rows to display"),
    letters_only: bool = typer.Option(False, "--letters-only", help="Reject digits in underlying roots"),
):
    """Batch-decode a ticker file and summarize rejects."""
    from rich.console import Console
    from rich.table import Table

    from occkit.options.frame import contracts_frame, error_counts
    from occkit.utils.formatting import fmt_date, fmt_strike

    lines = [ln.strip() for ln in path.read_text(encoding="utf-8").splitlines()]
    tickers = [ln for ln in lines if ln and not ln.startswith("#")]

    console = Console()
    df = contracts_frame(tickers, codec=_codec(letters_only))
    ok = df[df["error"].isna()]
    console.print(f"\n[bold cyan]{len(df)} tickers[/bold cyan] | decoded {len(ok)} | rejected {len(df) - len(ok)}\n")

    if not ok.empty:
        table = Table(show_header=True, expand=False)
        table.add_column("Underlying", style="cyan")
        table.add_column("Expiration")
        table.add_column("Type")
        table.add_column("Strike", justify="right", style="yellow")
        for _, row in ok.sort_values(["underlying", "expiration", "strike"]).head(show).iterrows():
            table.add_row(row["underlying"], fmt_date(row["expiration"]), row["option_type"], fmt_strike(row["strike"]))
        console.print(table)

    counts = error_counts(df)
    if counts:
        errs = Table(title="Rejected", show_header=True, expand=False)
        errs.add_column("Error", style="red")
        errs.add_column("Count", justify="right")
        for name, n in sorted(counts.items()):
            errs.add_row(name, str(n))
        console.print(errs)


if __name__ == "__main__":
    app()
