"""numutil – CLI entry point."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from numutil.config import load_settings
from numutil.errors import UndefinedResultError
from numutil.number_util import (
    absolute_value,
    divisors,
    factorial,
    gcd,
    is_prime,
    lcm,
    prime_factors,
    reciprocal,
    simplify_radical,
    simplify_rational,
)
from numutil.radical import Radical
from numutil.rational import Rational

load_dotenv()

app = typer.Typer(
    name="numutil",
    help="Fraction, number-theory and radical helpers.",
    add_completion=False,
)
console = Console()


@app.callback()
def main() -> None:
    """Configure logging from the environment before any command runs."""
    try:
        settings = load_settings()
    except ValueError as exc:
        _fail(str(exc))
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


@app.command()
def simplify(
    numerator: int = typer.Argument(..., help="Numerator of the fraction."),
    denominator: int = typer.Argument(..., help="Denominator of the fraction."),
) -> None:
    """Reduce a fraction to lowest terms."""
    fraction = Rational(numerator, denominator)
    try:
        simplify_rational(fraction)
    except UndefinedResultError as exc:
        _fail(str(exc))
    console.print(str(fraction))


@app.command(name="reciprocal")
def reciprocal_cmd(
    numerator: int = typer.Argument(..., help="Numerator of the fraction."),
    denominator: int = typer.Argument(..., help="Denominator of the fraction."),
) -> None:
    """Print the reciprocal of a fraction."""
    result = reciprocal(Rational(numerator, denominator))
    if result.is_undefined:
        console.print(f"[yellow]{result.numerator}/0 (undefined)[/yellow]")
        return
    console.print(str(result))


@app.command(name="abs")
def abs_cmd(
    numerator: int = typer.Argument(..., help="Numerator of the fraction."),
    denominator: int = typer.Argument(..., help="Denominator of the fraction."),
) -> None:
    """Print the absolute value of a fraction."""
    console.print(str(absolute_value(Rational(numerator, denominator))))


@app.command(name="gcd")
def gcd_cmd(a: int = typer.Argument(...), b: int = typer.Argument(...)) -> None:
    """Greatest common divisor of two integers."""
    console.print(str(gcd(a, b)))


@app.command(name="lcm")
def lcm_cmd(a: int = typer.Argument(...), b: int = typer.Argument(...)) -> None:
    """Least common multiple of two integers."""
    try:
        console.print(str(lcm(a, b)))
    except UndefinedResultError as exc:
        _fail(str(exc))


@app.command(name="is-prime")
def is_prime_cmd(n: int = typer.Argument(..., help="Integer to test.")) -> None:
    """Report whether an integer is prime."""
    if is_prime(n):
        console.print(f"[green]{n} is prime[/green]")
    else:
        console.print(f"{n} is not prime")


@app.command(name="divisors")
def divisors_cmd(n: int = typer.Argument(...)) -> None:
    """List the divisors of an integer."""
    console.print(", ".join(str(d) for d in divisors(n)))


@app.command()
def factors(n: int = typer.Argument(...)) -> None:
    """List the prime factors of an integer, with multiplicity."""
    result = prime_factors(n)
    console.print(", ".join(str(p) for p in result) if result else "[dim]none[/dim]")


@app.command(name="factorial")
def factorial_cmd(n: int = typer.Argument(...)) -> None:
    """Compute n! (0 for negative n)."""
    limit = load_settings().factorial_limit
    if n > limit:
        _fail(f"{n} exceeds NUMUTIL_FACTORIAL_LIMIT ({limit})")
    try:
        result = factorial(n)
    except RecursionError:
        _fail(f"{n}! recurses too deeply; lower NUMUTIL_FACTORIAL_LIMIT")
    console.print(str(result))


@app.command()
def radical(
    coefficient: int = typer.Argument(..., help="Coefficient in front of the root."),
    radicand: int = typer.Argument(..., help="Value under the root."),
    degree: int = typer.Argument(2, help="Root index (2 = square root)."),
    full: bool = typer.Option(False, "--full", help="Repeat until nothing more can be extracted."),
) -> None:
    """Simplify a radical one step (or fully with --full)."""
    current = Radical(coefficient, radicand, degree)
    if current.is_undefined:
        _fail("A radical of degree 0 is undefined")

    table = Table(title="Radical Simplification")
    table.add_column("Step", justify="right", style="magenta")
    table.add_column("Radical", style="cyan")
    table.add_row("0", str(current))

    step = 0
    while True:
        result = simplify_radical(current)
        if result == current:
            break
        step += 1
        table.add_row(str(step), str(result))
        current = result
        if not full:
            break

    console.print(table)
    if step == 0:
        console.print("[dim]Nothing to extract.[/dim]")


if __name__ == "__main__":
    app()
