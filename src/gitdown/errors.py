"""Exceptions raised by gitdown."""


class GitDownError(Exception):
    """Base class for gitdown errors."""

    pass


class RemoteRenderError(GitDownError):
    """Raised when the Markdown API responds with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API Error ({status_code}): {body}")


class AssetNotFoundError(GitDownError, FileNotFoundError):
    """Raised when a theme stylesheet does not exist."""

    def __init__(self, theme: str) -> None:
        self.theme = theme
        super().__init__(f"Stylesheet not found for theme: {theme}")


class CacheNotConfiguredError(GitDownError):
    """Raised when cached rendering is requested without a cache store."""

    pass
