"""CLI main entry point using Typer."""

import binascii
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gitdown.cache import DiskCacheStore
from gitdown.config.models import VALID_THEMES
from gitdown.config.settings import DEFAULT_CACHE_DIR, DEFAULT_LOG_LEVEL, DEFAULT_THEME
from gitdown.errors import AssetNotFoundError, RemoteRenderError
from gitdown.renderer import GitDown, build_document, load_styles
from gitdown.renderer.document import title_from_path

app = typer.Typer(
    name="gitdown",
    help="Render Markdown through the GitHub API",
    add_completion=False,
)

console = Console(stderr=True)


def _setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="Markdown file to render",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write HTML to this file instead of stdout",
    ),
    tags: list[str] | None = typer.Option(
        None,
        "--tag",
        help="Tag name to shield from the API (repeatable)",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        "-k",
        envvar="GITDOWN_TOKEN",
        help="GitHub API token",
    ),
    theme: str = typer.Option(
        DEFAULT_THEME,
        "--theme",
        "-t",
        help=f"Stylesheet theme ({'/'.join(VALID_THEMES)})",
    ),
    standalone: bool = typer.Option(
        False,
        "--standalone",
        "-s",
        help="Emit a full HTML page with the theme stylesheet inlined",
    ),
    cache: bool = typer.Option(
        False,
        "--cache/--no-cache",
        help="Memoize rendered output by content hash",
    ),
    cache_dir: Path = typer.Option(
        DEFAULT_CACHE_DIR,
        "--cache-dir",
        help="Directory for the render cache",
    ),
    ttl: float | None = typer.Option(
        None,
        "--ttl",
        help="Cache lifetime in minutes (default: forever)",
        min=0,
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help="Logging level (DEBUG/INFO/WARNING/ERROR)",
    ),
) -> None:
    """Render a Markdown file to HTML."""
    _setup_logging(log_level)

    if not path.is_file():
        console.print(f"[red]✗[/red] File not found: {escape(str(path))}", style="bold")
        raise typer.Exit(code=3)

    store = None
    try:
        if cache:
            store = DiskCacheStore(cache_dir)

        with GitDown(token=token, allowed_tags=tags or [], theme=theme, cache=store) as gitdown:
            content = path.read_text(encoding="utf-8")
            html = gitdown.render_cached(content, ttl) if store is not None else gitdown.render(content)

            if standalone:
                html = build_document(html, gitdown.styles(), title=title_from_path(path))

        if output:
            output.write_text(html, encoding="utf-8")
            console.print(f"[green]✓[/green] Rendered: {escape(str(output))}")
        else:
            typer.echo(html)

    except UnicodeDecodeError as e:
        console.print(f"[red]✗[/red] Cannot decode UTF-8 text: {escape(str(e))}", style="bold")
        raise typer.Exit(code=1)
    except binascii.Error as e:
        console.print(f"[red]✗[/red] Malformed shielded tag in response: {escape(str(e))}", style="bold")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[red]✗[/red] Configuration error: {escape(str(e))}", style="bold")
        raise typer.Exit(code=2)
    except AssetNotFoundError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", style="bold")
        raise typer.Exit(code=3)
    except RemoteRenderError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", style="bold")
        raise typer.Exit(code=4)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}", style="bold")
        raise typer.Exit(code=1)
    finally:
        if store is not None:
            store.close()


@app.command()
def styles(
    theme: str = typer.Option(
        DEFAULT_THEME,
        "--theme",
        "-t",
        help=f"Stylesheet theme ({'/'.join(VALID_THEMES)})",
    ),
) -> None:
    """Print the stylesheet for a theme."""
    try:
        typer.echo(load_styles(theme))
    except AssetNotFoundError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", style="bold")
        raise typer.Exit(code=3)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
