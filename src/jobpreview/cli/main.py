"""Job preview CLI using Typer.

Fetches a single posting and prints its description, mainly for checking
how a site's markup is handled.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from jobpreview.config.settings import get_settings
from jobpreview.domain import ExtractionResult, FetchFailedError, JobPreviewError, detect_platform
from jobpreview.extraction import JobDescriptionFetcher, build_headers

app = typer.Typer(
    name="jobpreview",
    help="Extract plain-text job descriptions from posting URLs",
    no_args_is_help=True,
)
console = Console()


async def _fetch(url: str) -> ExtractionResult:
    settings = get_settings()
    headers = build_headers(settings.user_agent, settings.accept_language)
    async with JobDescriptionFetcher(headers=headers, timeout=settings.fetch_timeout) as fetcher:
        return await fetcher.fetch(url)


@app.command("detect")
def detect(url: str = typer.Argument(..., help="Job posting URL")) -> None:
    """Print the platform a URL would be parsed as."""
    console.print(detect_platform(url).value)


@app.command("fetch")
def fetch(
    url: str = typer.Argument(..., help="Job posting URL"),
    raw: bool = typer.Option(False, "--raw", help="Print only the description text"),
) -> None:
    """Fetch a job posting and print its description."""
    try:
        result = asyncio.run(_fetch(url))
    except JobPreviewError as e:
        console.print(Text.assemble((e.code.value, "red"), f": {e.message}"))
        if isinstance(e, FetchFailedError) and e.cause:
            console.print(Text(e.cause, style="dim"))
        raise typer.Exit(code=1) from e

    if raw:
        console.print(result.description, markup=False, highlight=False)
        return

    console.print(
        Panel(
            Text(result.description),
            title=f"[bold]{result.platform.value}[/bold]",
            subtitle=f"{len(result.description)} chars",
        )
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
