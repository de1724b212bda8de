"""Core data models for gitdown."""

from dataclasses import dataclass, field

from gitdown.config.settings import API_URL, DEFAULT_THEME, USER_AGENT

# Valid theme names
VALID_THEMES = ["light", "dark"]


@dataclass
class RenderConfig:
    """Configuration for the remote Markdown renderer."""

    token: str | None = None  # GitHub API token
    context: str | None = None  # Repository context, stored but not sent
    allowed_tags: list[str] = field(default_factory=list)  # Tags shielded from the API
    theme: str = DEFAULT_THEME  # Stylesheet theme name
    api_url: str = API_URL  # Markdown endpoint
    user_agent: str = USER_AGENT  # User-Agent header value

    def headers(self) -> dict[str, str]:
        """Build request headers for the Markdown endpoint."""
        headers = {"User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def validate(self) -> None:
        """Validate configuration values."""
        if self.theme not in VALID_THEMES:
            raise ValueError(f"Invalid theme: {self.theme}")
        for tag in self.allowed_tags:
            if not tag or not tag.strip():
                raise ValueError("Tag names must not be empty")
