"""Console rendering of the lookup view."""

from english_dictionary.models import ResultViewModel, UIState
from english_dictionary.utils import html_to_plain


def format_result(result: ResultViewModel, audio_source: str | None = None) -> str:
    """Format the visible regions of the result panel as text.

    Args:
        result: Result view-model to format
        audio_source: URL of the loaded pronunciation, shown when audio is visible

    Returns:
        Multi-line text block
    """
    lines = [result.headword]
    if result.subtitle:
        lines.append(f"  {result.subtitle}")

    lines.append("")
    lines.append("Meaning")
    lines.append(f"  {result.meaning}")

    if result.example_visible:
        lines.append("")
        lines.append("Example")
        lines.append(f"  {result.example}")

    if result.synonyms_visible:
        lines.append("")
        lines.append("Synonyms")
        lines.append(f"  {', '.join(result.synonyms)}")

    if result.audio_visible and audio_source:
        lines.append("")
        lines.append(f"Audio: {audio_source}")

    return "\n".join(lines)


class ConsoleView:
    """Print view updates to stdout.

    Implements LookupView protocol. The info line is printed whenever it
    changes; the result block is printed each time a new result is shown.
    """

    def __init__(self, stream=None):
        self._stream = stream
        self._last_info: str | None = None
        self._last_result: str | None = None

    def render(self, state: UIState, result: ResultViewModel) -> None:
        if state.info_html != self._last_info:
            self._last_info = state.info_html
            self._print(html_to_plain(state.info_html))

        if not state.result_visible:
            self._last_result = None
            return

        audio_source = state.current_audio.source if state.current_audio is not None else None
        text = format_result(result, audio_source)
        if text != self._last_result:
            self._last_result = text
            self._print("")
            self._print(text)

    def set_input_text(self, text: str) -> None:
        # Nothing to edit on the console
        pass

    def focus_input(self) -> None:
        pass

    def _print(self, text: str) -> None:
        print(text, file=self._stream)
