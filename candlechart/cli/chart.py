"""Chart commands for candlechart CLI.

Loads candles from CSV/JSON files (or generates a demo series) and prints
them as a candlestick chart.
"""

import random
import re
from pathlib import Path
from typing import Callable, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from candlechart.config import load_chart_config
from candlechart.grid import Buffer, Rect
from candlechart.models import VALID_INTERVALS, Candle, ChartState, Interval
from candlechart.render.chart import CandleStickChart
from candlechart.render.config import ChartConfig, FitMode
from candlechart.render.x_axis import to_datetime

console = Console()

REQUIRED_COLUMNS = ["timestamp", "open", "high", "low", "close"]
DEFAULT_HEIGHT = 20

# 2023-11-14 22:13:20 UTC, start of the demo series before interval alignment
DEMO_START = 1_700_000_000_000

_OFFSET_PATTERN = re.compile(r"^([+-])?(\d{1,2})(?::?(\d{2}))?$")


def parse_offset(value: str) -> int:
    """Parse a UTC offset such as ``+05:30``, ``-0800`` or ``UTC`` into minutes.

    Raises:
        click.BadParameter: If the value is not an offset.
    """
    value = value.strip()
    if value.upper() in ("UTC", "Z"):
        return 0

    match = _OFFSET_PATTERN.match(value)
    if match is None:
        raise click.BadParameter(f"'{value}' is not a UTC offset like +05:30")

    sign, hours, minutes = match.groups()
    total = int(hours) * 60 + int(minutes or 0)
    return -total if sign == "-" else total


def _to_millis(series):
    """Convert a timestamp column (epoch ms or datetimes) to epoch milliseconds."""
    import pandas as pd

    if pd.api.types.is_numeric_dtype(series):
        return series.astype("int64")

    parsed = pd.to_datetime(series, utc=True)
    return (parsed - pd.Timestamp(0, tz="UTC")) // pd.Timedelta(milliseconds=1)


def load_candles(path: Path) -> list[Candle]:
    """Load candles from a CSV or JSON file.

    The file needs ``timestamp, open, high, low, close`` columns (any
    case). Timestamps are epoch milliseconds or anything pandas parses as a
    datetime; naive datetimes are taken as UTC.

    Args:
        path: CSV file, or JSON file holding a list of records.

    Returns:
        Candles sorted by timestamp.

    Raises:
        click.ClickException: If the file cannot be read or lacks columns.
        pydantic.ValidationError: If a row is not a valid candle.
    """
    import pandas as pd

    try:
        if path.suffix.lower() == ".json":
            df = pd.read_json(path, convert_dates=False)
        else:
            df = pd.read_csv(path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Could not read {path}: {e}") from e

    df.columns = [str(column).strip().lower() for column in df.columns]
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise click.ClickException(f"{path} is missing columns: {', '.join(missing)}")

    try:
        timestamps = _to_millis(df["timestamp"])
    except (ValueError, TypeError) as e:
        raise click.ClickException(f"Could not parse timestamps in {path}: {e}") from e

    df = df.assign(timestamp=timestamps).sort_values("timestamp", kind="stable")
    return [
        Candle(
            timestamp=int(row.timestamp),
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
        )
        for row in df.itertuples(index=False)
    ]


def demo_candles(count: int, interval: Interval, seed: int = 7) -> list[Candle]:
    """Generate a reproducible random-walk series.

    Args:
        count: Number of candles.
        interval: Spacing between candles.
        seed: Random seed.

    Returns:
        Candles starting at an interval-aligned timestamp.
    """
    rng = random.Random(seed)
    step = interval.millis
    start = DEMO_START - DEMO_START % step

    candles = []
    price = 100.0
    for i in range(count):
        open_price = price
        close_price = max(open_price * (1 + rng.gauss(0, 0.01)), 0.01)
        high = max(open_price, close_price) * (1 + abs(rng.gauss(0, 0.004)))
        low = max(min(open_price, close_price) * (1 - abs(rng.gauss(0, 0.004))), 0.0)
        candles.append(
            Candle(
                timestamp=start + i * step,
                open=open_price,
                high=high,
                low=low,
                close=close_price,
            )
        )
        price = close_price
    return candles


def build_config(
    config_path: Optional[Path] = None,
    interval: Optional[str] = None,
    fit: Optional[bool] = None,
    offset: Optional[str] = None,
    precision: Optional[int] = None,
    hide_x_axis: bool = False,
    hide_y_axis: bool = False,
) -> ChartConfig:
    """Combine the config file with command-line overrides.

    Raises:
        pydantic.ValidationError: If the resulting options are invalid.
    """
    config = load_chart_config(config_path)

    changes = {}
    if interval is not None:
        changes["interval"] = interval
    if fit is not None:
        changes["fit_mode"] = FitMode.FIT if fit else FitMode.FIXED
    if offset is not None:
        changes["display_offset_minutes"] = parse_offset(offset)
    if precision is not None:
        changes["numeric"] = {**config.numeric.model_dump(), "precision": precision}
    if hide_x_axis:
        changes["show_x_axis"] = False
    if hide_y_axis:
        changes["show_y_axis"] = False

    return config.with_options(**changes) if changes else config


def render_chart(
    candles: list[Candle],
    config: ChartConfig,
    width: int,
    height: int,
    cursor: Optional[int] = None,
    pan: int = 0,
) -> tuple[Buffer, ChartState]:
    """Render candles into a fresh buffer.

    Args:
        candles: Candle series.
        config: Chart options.
        width: Chart width in columns.
        height: Chart height in rows.
        cursor: Timestamp to pin the right edge at, None for the live view.
        pan: Intervals to pan left before the final render.

    Returns:
        Tuple of (buffer, state) after rendering.
    """
    chart = CandleStickChart(candles, config)
    area = Rect(width=width, height=height)
    state = ChartState(cursor_timestamp=cursor)

    if pan > 0:
        # First render publishes the window limits panning is clamped to
        chart.render(area, Buffer.empty(area), state)
        state.pan_left(pan)

    buffer = Buffer.empty(area)
    chart.render(area, buffer, state)
    return buffer, state


def _print_chart(buffer: Buffer, state: ChartState, candles: list[Candle], config: ChartConfig) -> None:
    """Print the rendered chart and a status line."""
    if state.info is None:
        console.print(Panel(
            "[yellow]The chart area is too small for the axes.[/yellow]\n\n"
            "Try a larger [cyan]--width[/cyan]/[cyan]--height[/cyan] or hide an axis.",
            title="[bold yellow]Nothing to draw[/bold yellow]",
            border_style="yellow",
        ))
        return

    console.print(buffer.to_text(), no_wrap=True, crop=True)

    if state.is_live:
        position = "[green]live[/green]"
    else:
        pinned = to_datetime(state.cursor_timestamp, config.display_timezone)
        position = f"[yellow]pinned at {pinned.strftime('%Y/%m/%d %H:%M:%S')}[/yellow]"
    console.print(
        f"[dim]{len(candles)} candles · {config.interval.value} · "
        f"{config.fit_mode.value}[/dim] · {position}"
    )


def _show_validation_error(error: ValidationError, source: str) -> None:
    console.print(Panel(
        f"[red]{error}[/red]",
        title=f"[bold red]Invalid {source}[/bold red]",
        border_style="red",
    ))


def chart_options(func):
    """Options shared by every chart command."""
    options = [
        click.option(
            "-i", "--interval",
            type=click.Choice(VALID_INTERVALS),
            default=None,
            help="Candle interval (default: from config, else 1m).",
        ),
        click.option(
            "--fit/--fixed",
            default=None,
            help="Fit all candles to the width, or draw one candle per column.",
        ),
        click.option(
            "-w", "--width",
            type=click.IntRange(min=1),
            default=None,
            help="Chart width in columns (default: terminal width).",
        ),
        click.option(
            "-H", "--height",
            type=click.IntRange(min=1),
            default=DEFAULT_HEIGHT,
            show_default=True,
            help="Chart height in rows.",
        ),
        click.option(
            "--offset",
            default=None,
            help="UTC offset for time labels, e.g. +05:30.",
        ),
        click.option(
            "--cursor",
            type=int,
            default=None,
            help="Pin the right edge at this timestamp (epoch ms).",
        ),
        click.option(
            "--pan",
            type=click.IntRange(min=0),
            default=0,
            help="Pan this many intervals back from the live edge.",
        ),
        click.option(
            "-p", "--precision",
            type=click.IntRange(min=0, max=12),
            default=None,
            help="Decimal places of price labels.",
        ),
        click.option("--no-x-axis", "hide_x_axis", is_flag=True, help="Hide the time axis."),
        click.option("--no-y-axis", "hide_y_axis", is_flag=True, help="Hide the price axis."),
        click.option(
            "--config", "config_path",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help="Config file (default: ~/.config/candlechart/config.toml).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run(options: dict, make_candles: Callable[[ChartConfig], list[Candle]]) -> None:
    """Build the config from ``options``, render the candles and print."""
    try:
        config = build_config(
            config_path=options["config_path"],
            interval=options["interval"],
            fit=options["fit"],
            offset=options["offset"],
            precision=options["precision"],
            hide_x_axis=options["hide_x_axis"],
            hide_y_axis=options["hide_y_axis"],
        )
    except ValidationError as e:
        _show_validation_error(e, "chart options")
        raise click.exceptions.Exit(1)

    candles = make_candles(config)
    width = options["width"] or console.width
    buffer, state = render_chart(
        candles,
        config,
        width=width,
        height=options["height"],
        cursor=options["cursor"],
        pan=options["pan"],
    )
    _print_chart(buffer, state, candles, config)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@chart_options
def show(path: Path, **options) -> None:
    """Render candles from a CSV or JSON file.

    PATH is a file with timestamp, open, high, low and close columns.

    \b
    Examples:
      candlechart show btc.csv                    # Live view, 1m candles
      candlechart show btc.csv -i 5m --fit        # Whole series fitted
      candlechart show btc.csv --pan 30           # 30 candles back in time
      candlechart show btc.json --offset +05:30   # Labels in IST
    """
    try:
        candles = load_candles(path)
    except ValidationError as e:
        _show_validation_error(e, f"candle in {path}")
        raise click.exceptions.Exit(1)

    if not candles:
        console.print(f"[yellow]No candles in {path}[/yellow]")
        return

    _run(options, lambda config: candles)


@click.command()
@click.option(
    "-n", "--count",
    type=click.IntRange(min=1),
    default=120,
    show_default=True,
    help="Number of candles to generate.",
)
@click.option("--seed", type=int, default=7, show_default=True, help="Random seed.")
@chart_options
def demo(count: int, seed: int, **options) -> None:
    """Render a random-walk series.

    Handy for trying widths, fit modes and panning without a data file.

    \b
    Examples:
      candlechart demo                  # 120 one-minute candles
      candlechart demo -n 500 --fit     # Squash 500 candles to the width
      candlechart demo -n 10 --fit      # Stretch 10 candles
    """
    _run(options, lambda config: demo_candles(count, config.interval, seed))
