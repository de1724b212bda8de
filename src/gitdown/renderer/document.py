"""Standalone HTML document output."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gitdown.config.settings import TEMPLATES_DIR

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def build_document(body_html: str, styles: str, title: str = "") -> str:
    """
    Wrap rendered HTML in a complete page with the stylesheet inlined.

    Args:
        body_html: HTML returned by the renderer
        styles: Stylesheet contents
        title: Page title

    Returns:
        Full HTML document
    """
    template = _env.get_template("document.html")
    return template.render(title=title, styles=styles, body=body_html)


def title_from_path(path: Path) -> str:
    """Derive a page title from a Markdown file name."""
    return path.stem.replace("-", " ").replace("_", " ").strip() or path.name
