import asyncio

import typer

from usage_bot.errors import UsageFetchError
from usage_bot.services.commands import render_error
from usage_bot.services.usage import UsageService

cli = typer.Typer()

@cli.command()
def start() -> None:
    from usage_bot.main import start_bot

    start_bot()

@cli.command()
def check(url: str, timeout: float = typer.Option(5.0, help="Fetch budget in seconds.")) -> None:
    """Fetch a usage summary once and print the report."""
    try:
        text = asyncio.run(UsageService(timeout=timeout).fetch_report_text(url))
    except UsageFetchError as e:
        typer.echo(render_error(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(text)


if __name__ == '__main__':
    cli()
