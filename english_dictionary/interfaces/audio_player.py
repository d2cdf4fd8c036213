"""Protocols for pronunciation audio playback."""

from typing import Protocol


class AudioHandle(Protocol):
    """A loaded audio resource for one pronunciation."""

    @property
    def source(self) -> str:
        """URL the audio was loaded from."""
        ...

    def play(self) -> None:
        """Start playback without waiting for it to finish."""
        ...

    def stop(self) -> None:
        """Stop playback and release the resource."""
        ...


class AudioPlayer(Protocol):
    """Factory that loads audio URLs into playable handles."""

    def load(self, url: str) -> AudioHandle:
        """Load an audio resource.

        Args:
            url: Audio file URL (non-empty).

        Returns:
            Handle that can play the audio.
        """
        ...
