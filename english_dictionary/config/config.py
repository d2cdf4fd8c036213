"""Configuration classes for English Dictionary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DictionaryConfig:
    """Immutable configuration for dictionary lookups and the GUI.

    All configuration is frozen (immutable) so the lookup worker threads
    can share it with the GUI thread without copying.
    """

    # Lookup service settings
    api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    request_timeout: float = 10.0  # Seconds before an outbound request is abandoned

    # Only the response of the most recent lookup is applied to the view
    discard_stale_responses: bool = True

    # GUI settings
    notification_timeout_ms: int = 4000
    window_width: int = 520
    window_height: int = 640

    def __post_init__(self):
        """Normalize values loaded from user files."""
        if self.api_url.endswith("/"):
            object.__setattr__(self, "api_url", self.api_url.rstrip("/"))
        if isinstance(self.request_timeout, int):
            object.__setattr__(self, "request_timeout", float(self.request_timeout))
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
