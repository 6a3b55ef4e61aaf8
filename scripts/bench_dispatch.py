"""Benchmarks for the call shapes of fpkit: data-first vs curried vs method or pipe."""

import statistics
import timeit
from collections.abc import Callable
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import fpkit as fp
from fpkit import array as A
from fpkit import option as O
from fpkit import result as R

type BenchFn = Callable[[], object]

app = typer.Typer(help="Call-shape benchmarks for fpkit.")

CONSOLE: Final = Console()


class Case(NamedTuple):
    """One operation, timed under each call shape."""

    category: str
    name: str
    shapes: dict[str, BenchFn]


class Row(NamedTuple):
    """Median timing of one call shape."""

    category: str
    name: str
    shape: str
    median: float


def _cases() -> list[Case]:
    some = fp.Some(3)
    ok = fp.Ok(3)
    data = list(range(64))
    inc = O.map(lambda x: x + 1)
    default = O.unwrap_or(0)
    res_inc = R.map(lambda x: x + 1)
    evens = A.filter(lambda n: n % 2 == 0)
    return [
        Case(
            "option",
            "map",
            {
                "data-first": lambda: O.map(some, lambda x: x + 1),
                "curried": lambda: inc(some),
                "method": lambda: some.map(lambda x: x + 1),
            },
        ),
        Case(
            "option",
            "unwrap_or",
            {
                "data-first": lambda: O.unwrap_or(fp.NONE, 0),
                "curried": lambda: default(fp.NONE),
                "method": lambda: fp.NONE.unwrap_or(0),
            },
        ),
        Case(
            "result",
            "map",
            {
                "data-first": lambda: R.map(ok, lambda x: x + 1),
                "curried": lambda: res_inc(ok),
                "method": lambda: ok.map(lambda x: x + 1),
            },
        ),
        Case(
            "array",
            "filter",
            {
                "data-first": lambda: A.filter(data, lambda n: n % 2 == 0),
                "curried": lambda: evens(data),
                "pipe": lambda: fp.pipe(data, evens),
            },
        ),
    ]


def _run(cases: list[Case], runs: int, number: int) -> list[Row]:
    total = sum(len(case.shapes) for case in cases) * runs
    CONSOLE.print(f"[dim]Found {len(cases)} cases, {total} total runs[/dim]")
    rows: list[Row] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total)
        for case in cases:
            for shape, fn in case.shapes.items():
                progress.update(
                    task, description=f"[cyan]{case.category}: {case.name} ({shape})"
                )
                times: list[float] = []
                for _ in range(runs):
                    times.append(timeit.timeit(fn, number=number) / number)
                    progress.advance(task)
                rows.append(
                    Row(case.category, case.name, shape, statistics.median(times))
                )
    return rows


def _build_table(rows: list[Row]) -> Table:
    table = Table(title="Call shape timings")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Shape", style="magenta")
    table.add_column("Median (ns)", justify="right", style="green")
    table.add_column("vs data-first", justify="right")
    baselines = {
        (row.category, row.name): row.median
        for row in rows
        if row.shape == "data-first"
    }
    for row in rows:
        baseline = baselines[(row.category, row.name)]
        ratio = row.median / baseline
        table.add_row(
            row.category,
            row.name,
            row.shape,
            f"{row.median * 1e9:.1f}",
            Text(f"{ratio:.2f}x", style="green" if ratio <= 1 else "red"),
        )
    return table


@app.command()
def main(
    runs: int = typer.Option(20, help="Number of timed runs per call shape."),
    number: int = typer.Option(10_000, help="Calls per timed run."),
) -> None:
    """Time every call shape and print a comparison table."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    rows = _run(_cases(), runs, number)
    CONSOLE.print()
    CONSOLE.print(_build_table(rows))


if __name__ == "__main__":
    app()
