"""
pagekit CLI - Inspect page elements from the command line.
"""

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

console = Console()

INSPECTED_ATTRIBUTES = ["id", "name", "class", "type", "value", "href", "role"]


@click.group()
@click.version_option(prog_name="pagekit", package_name="pagekit")
def cli():
    """pagekit - Page-object element handles for Selenium."""
    pass


@cli.command()
@click.argument('url')
@click.argument('selector')
@click.option('--type', 'element_type', default='element',
              type=click.Choice(['element', 'checkbox', 'dropdown', 'input', 'table']),
              help='Element type to cast the match to')
@click.option('--headless/--headed', default=True, help='Run browser in headless mode')
@click.option('--highlight', is_flag=True, help='Draw a border around the element')
@click.option('--timeout', default=None, type=float, help='Seconds to wait for the element')
def inspect(url, selector, element_type, headless, highlight, timeout):
    """
    Locate an element on a page and show its state.

    SELECTOR accepts a CSS selector or a "type:locator" shorthand.

    \b
    Examples:

        pagekit inspect "https://example.com" "tag:h1"

        pagekit inspect "https://example.com/login" "id:remember" --type checkbox
    """
    from pagekit.core import ElementQuery
    from pagekit.core.driver_factory import driver_session

    with driver_session(headless=headless) as driver:
        driver.get(url)
        query = ElementQuery(selector).as_type(element_type)
        element = query.wait_until_present(timeout).one()

        if highlight:
            element.highlight()

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Property", style="blue")
        table.add_column("Value")

        table.add_row("Selector", str(element.by))
        table.add_row("Type", element.__class__.__name__)
        table.add_row("Tag", element.get_tag_name())
        table.add_row("Text", _preview(element.get_text()))
        table.add_row("Displayed", _flag(element.is_displayed()))
        table.add_row("Enabled", _flag(element.is_enabled()))
        table.add_row("Clickable", _flag(element.is_clickable()))
        table.add_row("Selected", _flag(element.is_selected()))

        for name in INSPECTED_ATTRIBUTES:
            value = element.get_attribute(name)
            if value is not None:
                table.add_row(f"@{name}", _preview(value))

        console.print(Panel.fit(f"[bold]{url}[/bold]", border_style="blue"))
        console.print(table)

        if query.count() > 1:
            console.print(f"[yellow]Selector matched {query.count()} elements, showing the first.[/yellow]")


@cli.command()
def doctor():
    """
    Check that required packages are installed.
    """
    dependencies = [
        ("selenium", "WebDriver client"),
        ("click", "Command line"),
        ("rich", "Console output"),
    ]

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Package", style="blue")
    table.add_column("Role", style="dim")
    table.add_column("Status", justify="center")

    all_good = True

    for package, role in dependencies:
        try:
            __import__(package)
            status = "[green]Installed[/green]"
        except ImportError:
            status = "[red]Missing[/red]"
            all_good = False

        table.add_row(package, role, status)

    console.print(table)

    if all_good:
        console.print("[bold green]All dependencies installed.[/bold green]")
    else:
        console.print("[red]Some dependencies are missing.[/red]")
        raise SystemExit(1)


@cli.command()
def version():
    """Show version information."""
    from pagekit import __version__
    console.print(f"pagekit v{__version__}")


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


def _preview(text: str, limit: int = 60) -> str:
    text = (text or "").strip()
    return text[:limit] + "..." if len(text) > limit else text


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
