"""Palindromic fuel CLI application using Typer.

Forward searches, reverse lookups and batch runs print a console report;
`serve` starts the web interface.
"""

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .bench import do_iters
from .config import configure_logging, get_settings
from .exceptions import ExportError, InputError
from .export import export_batch_csv, export_csv
from .inputs import parse_price_list
from .report import print_result, print_results
from .search import batch as batch_search
from .search import forward_search, near_target_cost, nearest_to_target

app = typer.Typer(
    name="palindromic-fuel",
    help="Find fuel costs that read the same forwards and backwards.",
    no_args_is_help=True,
)
console = Console(soft_wrap=True)


def _ms(nanos: int) -> str:
    return f"{nanos / 1_000_000:.3f}ms"


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {message}", highlight=False)
    return typer.Exit(code=1)


def _export(write, path: Path) -> None:
    try:
        write()
    except ExportError as e:
        raise _fail(f"exporting to CSV: {e}")
    console.print(f"\nResults exported to {path}", highlight=False)


@app.callback()
def main() -> None:
    configure_logging(get_settings())


@app.command()
def search(
    price: float = typer.Option(..., help="Price per unit volume in minor units (e.g. pence)"),
    max_volume: Optional[int] = typer.Option(None, "--max", help="Maximum volume to check"),
    csv: Optional[Path] = typer.Option(None, help="Export results to this CSV file"),
    epsilon: Optional[float] = typer.Option(None, help="Tolerance for whole volumes"),
) -> None:
    """Find every palindromic cost up to a maximum volume."""
    settings = get_settings()
    max_volume = settings.max_volume if max_volume is None else max_volume
    epsilon = settings.epsilon if epsilon is None else epsilon

    start = time.perf_counter_ns()
    results = forward_search(price, max_volume, epsilon)
    elapsed = time.perf_counter_ns() - start

    console.print(f"\nPerformance: Found {len(results)} results in {_ms(elapsed)}", highlight=False)
    console.print(f"Effective range checked: 1-{max_volume} {settings.volume_unit}", highlight=False)
    print_results(console, results, price, settings.display_limit,
                  settings.currency_symbol, settings.volume_unit)

    if csv is not None:
        _export(lambda: export_csv(csv, results, price), csv)


@app.command()
def nearest(
    price: float = typer.Option(..., help="Price per unit volume in minor units"),
    volume: float = typer.Option(..., help="Target volume"),
    radius: Optional[int] = typer.Option(None, help="Search radius in volume units"),
    epsilon: Optional[float] = typer.Option(None, help="Tolerance for whole volumes"),
) -> None:
    """Find the palindromic cost whose volume is nearest a target volume."""
    settings = get_settings()
    radius = settings.search_radius if radius is None else radius
    epsilon = settings.epsilon if epsilon is None else epsilon

    console.print(f"\nFinding nearest palindromic cost to {volume:.2f} {settings.volume_unit} "
                  f"at {price:.1f} per unit", highlight=False)
    console.print(f"Search radius: ±{radius} {settings.volume_unit}", highlight=False)

    start = time.perf_counter_ns()
    result = nearest_to_target(price, volume, radius, epsilon)
    elapsed = time.perf_counter_ns() - start

    if result is None:
        console.print("\nNo palindromic costs found in search radius")
    else:
        console.print("\nNearest palindromic cost:")
        print_result(console, result, settings.currency_symbol, settings.volume_unit)
        console.print(f"Difference: {abs(result.volume - volume):.2f} {settings.volume_unit}",
                      highlight=False)

    console.print(f"\nSearch completed in {_ms(elapsed)}", highlight=False)


@app.command("near-cost")
def near_cost(
    price: float = typer.Option(..., help="Price per unit volume in minor units"),
    cost: float = typer.Option(..., help="Target cost in major units (e.g. pounds)"),
    radius: Optional[int] = typer.Option(None, help="Search radius in minor units"),
    epsilon: Optional[float] = typer.Option(None, help="Tolerance for whole volumes"),
) -> None:
    """Find palindromic costs close to a target cost."""
    settings = get_settings()
    radius = settings.search_radius if radius is None else radius
    epsilon = settings.epsilon if epsilon is None else epsilon
    symbol = settings.currency_symbol

    console.print(f"\nFinding palindromic costs near {symbol}{cost:.2f} at {price:.1f} per unit",
                  highlight=False)
    console.print(f"Search radius: ±{radius} minor units", highlight=False)

    start = time.perf_counter_ns()
    results = near_target_cost(price, cost, radius, epsilon)
    elapsed = time.perf_counter_ns() - start

    if not results:
        console.print("\nNo palindromic costs found in search radius")
    else:
        console.print(f"\nFound {len(results)} palindromic cost(s):\n", highlight=False)
        for result in results:
            print_result(console, result, symbol, settings.volume_unit)
            diff = abs(float(result.cost_major_units) - cost)
            console.print(f"  Price difference: {symbol}{diff:.2f}", highlight=False)

    console.print(f"\nSearch completed in {_ms(elapsed)}", highlight=False)


@app.command()
def batch(
    prices: str = typer.Option(..., help="Comma-separated prices, e.g. 128.9,135.7,142.3"),
    max_volume: Optional[int] = typer.Option(None, "--max", help="Maximum volume to check"),
    csv: Optional[Path] = typer.Option(None, help="Export results to this CSV file"),
    epsilon: Optional[float] = typer.Option(None, help="Tolerance for whole volumes"),
) -> None:
    """Run the forward search for several prices."""
    settings = get_settings()
    max_volume = settings.max_volume if max_volume is None else max_volume
    epsilon = settings.epsilon if epsilon is None else epsilon

    try:
        price_list = parse_price_list(prices)
    except InputError as e:
        raise _fail(str(e))

    console.print(f"\n=== Batch Processing {len(price_list)} Fuel Prices ===", highlight=False)
    start = time.perf_counter_ns()
    results = batch_search(price_list, max_volume, epsilon)
    elapsed = time.perf_counter_ns() - start

    console.print(f"\nTotal batch time: {_ms(elapsed)}", highlight=False)
    console.print(f"Average per price: {_ms(elapsed // len(price_list))}", highlight=False)

    for price in price_list:
        print_results(console, results[price], price, settings.display_limit,
                      settings.currency_symbol, settings.volume_unit)

    if csv is not None:
        _export(lambda: export_batch_csv(csv, results, price_list), csv)


@app.command()
def bench(
    price: float = typer.Option(..., help="Price per unit volume in minor units"),
    max_volume: Optional[int] = typer.Option(None, "--max", help="Maximum volume to check"),
    iters: int = typer.Option(100, min=1, help="Number of iterations"),
) -> None:
    """Time repeated forward searches."""
    settings = get_settings()
    max_volume = settings.max_volume if max_volume is None else max_volume

    last, acc, nanos = do_iters(price, max_volume, iters, settings.epsilon)
    console.print(f"OK {last} {acc} {nanos}", highlight=False)
    console.print(f"Average per search: {_ms(nanos // iters)}", highlight=False)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind"),
    port: Optional[int] = typer.Option(None, help="Port for the web server"),
) -> None:
    """Start the web interface and JSON API."""
    import uvicorn

    from .web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"Starting web server on port {port}", highlight=False)
    console.print(f"Web UI: http://{host}:{port}/", highlight=False)
    console.print(f"API: http://{host}:{port}/api/calculate", highlight=False)

    uvicorn.run(create_app(settings), host=host, port=port)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
