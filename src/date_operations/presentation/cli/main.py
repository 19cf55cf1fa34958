"""Main CLI application for DateOperations."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from date_operations import __version__
from date_operations.domain.exceptions import DateError
from date_operations.domain.value_objects.custom_date import CustomDate
from date_operations.shared.config.settings import get_settings
from date_operations.shared.logging_setup import get_logger, setup_logging

app = typer.Typer(
    name="date-operations",
    help="Calendar date arithmetic and formatting",
    add_completion=False,
)
console = Console(highlight=False)
logger = get_logger("cli")

# Lets negative day offsets such as -5 through as arguments
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _build_date(day: int, month: int, year: int) -> CustomDate:
    """Construct a date or exit with status 1."""
    try:
        return CustomDate(day, month, year)
    except DateError as e:
        logger.warning(f"Rejected date {day}/{month}/{year}: {e}")
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Calendar date arithmetic and formatting."""
    settings = get_settings()
    settings.ensure_directories()
    setup_logging(settings.logging, level="DEBUG" if verbose or settings.debug else None)


@app.command()
def version():
    """Show version information."""
    settings = get_settings()
    console.print(Panel(
        Text(f"{settings.app_name} v{__version__}\nCalendar date arithmetic", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def demo():
    """Run the demonstration: construct, shift, compare and format a date."""
    settings = get_settings()
    current_date = _build_date(settings.demo.day, settings.demo.month, settings.demo.year)
    offset = settings.demo.offset_days
    try:
        new_date = current_date + offset
    except DateError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    logger.debug(f"Demo: {current_date} + {offset} = {new_date}")

    console.print(f"Current Date: {current_date}")
    console.print(f"New Date (currentDate + {offset} days): {new_date}")
    console.print(f"Are current date and new date equal? {current_date == new_date}")
    console.print(f"Long date format: {current_date.to_long_string()}")


@app.command()
def show(
    day: int = typer.Argument(..., help="Day of month"),
    month: int = typer.Argument(..., help="Month (1-12)"),
    year: int = typer.Argument(..., help="Year (1-9999)"),
    long_format: bool = typer.Option(False, "--long", "-l", help="Use 'DD Month YYYY' format"),
):
    """Print a date in short or long format."""
    date = _build_date(day, month, year)
    console.print(date.to_long_string() if long_format else str(date))


@app.command(context_settings=NUMERIC_ARGS)
def add(
    day: int = typer.Argument(..., help="Day of month"),
    month: int = typer.Argument(..., help="Month (1-12)"),
    year: int = typer.Argument(..., help="Year (1-9999)"),
    days: int = typer.Argument(..., help="Days to add, negative to subtract"),
):
    """Print a date shifted by a number of days."""
    date = _build_date(day, month, year)
    try:
        result = date.add_days(days)
    except DateError as e:
        logger.warning(f"Cannot add {days} days to {date}: {e}")
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    logger.debug(f"{date} + {days} days = {result}")
    console.print(str(result))


@app.command()
def compare(
    day1: int = typer.Argument(..., help="First date day"),
    month1: int = typer.Argument(..., help="First date month"),
    year1: int = typer.Argument(..., help="First date year"),
    day2: int = typer.Argument(..., help="Second date day"),
    month2: int = typer.Argument(..., help="Second date month"),
    year2: int = typer.Argument(..., help="Second date year"),
):
    """Print whether two dates are equal."""
    first = _build_date(day1, month1, year1)
    second = _build_date(day2, month2, year2)
    if first == second:
        console.print(f"[green]{first} and {second} are equal[/green]")
    else:
        console.print(f"[yellow]{first} and {second} are not equal[/yellow]")


if __name__ == "__main__":
    app()
