"""GitHub Markdown API client."""

import hashlib
import logging
from typing import Callable, Sequence

import httpx

from gitdown.cache.store import CacheStore
from gitdown.config.models import RenderConfig
from gitdown.config.settings import API_URL, DEFAULT_THEME
from gitdown.errors import CacheNotConfiguredError, RemoteRenderError
from gitdown.renderer.shield import shield, unshield
from gitdown.renderer.styles import load_styles

logger = logging.getLogger(__name__)

MemoizeStrategy = Callable[[Callable[[], str]], str]


class GitDown:
    """Renders Markdown through the GitHub API, shielding allowed tags."""

    def __init__(
        self,
        token: str | None = None,
        context: str | None = None,
        allowed_tags: Sequence[str] | None = None,
        theme: str = DEFAULT_THEME,
        client: httpx.Client | None = None,
        cache: CacheStore | None = None,
        api_url: str = API_URL,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub API token, sent as ``Authorization: token ...``
            context: Repository context (stored only)
            allowed_tags: Tag names to shield from the API
            theme: Stylesheet theme
            client: HTTP client; one is created and owned when omitted
            cache: Store used by :meth:`render_cached`
            api_url: Markdown endpoint
        """
        self.config = RenderConfig(
            token=token,
            context=context,
            allowed_tags=list(allowed_tags or []),
            theme=theme,
            api_url=api_url,
        )
        self.config.validate()
        self.cache = cache
        self._owns_client = client is None
        self.client = client or httpx.Client()

    @classmethod
    def from_config(
        cls,
        config: RenderConfig,
        client: httpx.Client | None = None,
        cache: CacheStore | None = None,
    ) -> "GitDown":
        """Create a client from an existing configuration."""
        gitdown = cls(client=client, cache=cache, api_url=config.api_url)
        gitdown.config = config
        config.validate()
        return gitdown

    def set_token(self, token: str | None) -> "GitDown":
        """Set the API token; ``None`` sends requests unauthenticated."""
        self.config.token = token
        return self

    def set_context(self, context: str | None) -> "GitDown":
        """Set the repository context."""
        self.config.context = context
        return self

    def with_tags(self, allowed_tags: Sequence[str] = ()) -> "GitDown":
        """Replace the shielded tag list."""
        previous = self.config.allowed_tags
        self.config.allowed_tags = list(allowed_tags)
        try:
            self.config.validate()
        except ValueError:
            self.config.allowed_tags = previous
            raise
        return self

    def set_theme(self, theme: str) -> "GitDown":
        """Switch the stylesheet theme."""
        previous = self.config.theme
        self.config.theme = theme
        try:
            self.config.validate()
        except ValueError:
            self.config.theme = previous
            raise
        return self

    def render(self, content: str) -> str:
        """
        Render Markdown content to HTML via the GitHub API.

        Args:
            content: Raw Markdown string

        Returns:
            Rendered HTML string with allowed tags restored

        Raises:
            RemoteRenderError: If the API responds with a non-2xx status
        """
        tags = self.config.allowed_tags
        logger.debug(f"Rendering {len(content)} chars via {self.config.api_url}")

        response = self.client.post(
            self.config.api_url,
            headers=self.config.headers(),
            json={"text": shield(content, tags)},
        )

        if not 200 <= response.status_code < 300:
            logger.warning(f"Markdown API returned {response.status_code}")
            raise RemoteRenderError(response.status_code, response.text)

        return unshield(response.text, tags)

    def render_cached(
        self, content: str, minutes: float | MemoizeStrategy | None = None
    ) -> str:
        """
        Render content, memoizing the result by a SHA-1 of the content.

        Args:
            content: Raw Markdown string
            minutes: ``None`` to cache forever, a number of minutes to cache
                for, or a callable that receives a zero-argument producer
                and applies its own caching policy

        Returns:
            Rendered HTML string

        Raises:
            CacheNotConfiguredError: If a store is needed but none was given
        """

        def producer() -> str:
            return self.render(content)

        if callable(minutes):
            return minutes(producer)

        if self.cache is None:
            raise CacheNotConfiguredError("No cache store configured")

        key = hashlib.sha1(content.encode("utf-8")).hexdigest()
        if minutes is None:
            return self.cache.remember_forever(key, producer)
        return self.cache.remember(key, minutes, producer)

    def styles(self) -> str:
        """Return the stylesheet for the configured theme."""
        return load_styles(self.config.theme)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "GitDown":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
