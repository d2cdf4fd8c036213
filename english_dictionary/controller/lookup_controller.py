"""Controller binding search form events to dictionary lookups."""

import html
import logging
from collections.abc import Mapping

from english_dictionary.config import DictionaryConfig
from english_dictionary.exceptions import LookupFailure, ValidationError
from english_dictionary.interfaces import (
    AudioPlayer,
    LookupScheduler,
    LookupView,
    PresenterProtocol,
)
from english_dictionary.models import DEFAULT_PROMPT, LexicalEntry, ResultViewModel, UIState
from english_dictionary.presenters import MessageLevel

logger = logging.getLogger(__name__)

EMPTY_WORD_MESSAGE = "Please enter a word."
LOOKUP_FAILED_MESSAGE = "Something went wrong, check the log for details."


def searching_message(term: str) -> str:
    """Info line shown while a lookup is in flight."""
    return f'Searching the meaning of <b>"{html.escape(term)}"</b>'


def not_found_message(term: str) -> str:
    """Info line shown after a failed lookup."""
    return (
        f'Can\'t find the meaning of <b>"{html.escape(term)}"</b>. '
        "Please, try to search for another word."
    )


class LookupController:
    """Wire search form events to the lookup workflow and render the results.

    The controller owns the UIState and the ResultViewModel. Views only
    forward events and draw what render() hands them; the scheduler decides
    on which thread the request runs but always reports back on the
    controller's thread.

    Only the first entry, its first meaning, that meaning's first definition
    and the first phonetic are shown.
    """

    def __init__(
        self,
        config: DictionaryConfig,
        scheduler: LookupScheduler,
        presenter: PresenterProtocol,
        audio_player: AudioPlayer,
        view: LookupView,
    ):
        """Initialize the controller.

        Args:
            config: Application configuration
            scheduler: Runs the outbound dictionary requests
            presenter: Shows transient notifications
            audio_player: Loads pronunciation audio
            view: Presentation surface to render into
        """
        self.config = config
        self.scheduler = scheduler
        self.presenter = presenter
        self.audio_player = audio_player
        self.view = view

        self.state = UIState()
        self.result = ResultViewModel()

    def render(self) -> None:
        """Push current state to the view."""
        self.view.render(self.state, self.result)

    # ------------------------------------------------------------------
    # Form events
    # ------------------------------------------------------------------

    def handle_input_change(self, current_text: str) -> None:
        """Toggle the clear button as the user types.

        Args:
            current_text: Raw search field contents
        """
        self.state.query_text = current_text
        self.state.clear_visible = bool(current_text.strip())
        self.render()

    def handle_clear(self) -> None:
        """Reset the form and hide the result panel."""
        self.state.query_text = ""
        self.state.clear_visible = False
        self.state.info_html = DEFAULT_PROMPT
        self.state.result_visible = False

        self.view.set_input_text("")
        self.view.focus_input()
        self.render()

    def handle_submit(self, form_values: Mapping[str, str]) -> bool:
        """Validate the submitted word and start a lookup.

        Args:
            form_values: Submitted form fields; the term is under "word"

        Returns:
            True if a lookup was started
        """
        raw = form_values.get("word") or ""
        self.state.query_text = raw

        try:
            term = self._validate_term(raw)
        except ValidationError as e:
            logger.debug(f"Rejected submission: {e}")
            self.presenter.notify(MessageLevel.WARNING, EMPTY_WORD_MESSAGE)
            return False

        self.lookup_word(term)
        return True

    def handle_synonym_activated(self, term: str) -> None:
        """Look up a synonym that was clicked in the result panel.

        Args:
            term: The synonym, used verbatim as the new query
        """
        self.state.query_text = term
        self.state.clear_visible = bool(term.strip())
        self.view.set_input_text(term)
        self.lookup_word(term)

    def play_pronunciation(self) -> None:
        """Play the loaded pronunciation, if any."""
        if self.state.current_audio is None:
            logger.debug("No pronunciation loaded, ignoring play request")
            return
        self.state.current_audio.play()

    # ------------------------------------------------------------------
    # Lookup workflow
    # ------------------------------------------------------------------

    def lookup_word(self, term: str) -> int:
        """Start a lookup for term and show the searching message.

        The view updates immediately; the result panel changes only once
        the scheduler reports back.

        Args:
            term: Word to look up

        Returns:
            Sequence number assigned to this request
        """
        self.state.request_seq += 1
        seq = self.state.request_seq

        self.state.info_html = searching_message(term)
        self.render()

        logger.info(f"Looking up '{term}' (request {seq})")
        self.scheduler.schedule(
            term,
            lambda entries: self.apply_result(seq, term, entries),
            lambda error: self.apply_failure(seq, term, error),
        )
        return seq

    def apply_result(self, seq: int, term: str, entries: list[LexicalEntry]) -> None:
        """Populate the result panel from a successful lookup.

        Args:
            seq: Sequence number of the request
            term: The looked-up term
            entries: Parsed entries; only the first is shown
        """
        if self._is_stale(seq):
            logger.debug(f"Discarding stale result for '{term}' (request {seq})")
            return

        if not entries:
            self.apply_failure(seq, term, LookupFailure("Empty lookup result", term))
            return

        entry = entries[0]
        meaning = entry.first_meaning
        definition = entry.first_definition
        phonetic = entry.first_phonetic

        if meaning is None or definition is None:
            self.apply_failure(
                seq, term, LookupFailure(f"Entry '{entry.word}' has no definition", term)
            )
            return

        pronunciation = phonetic.text if phonetic is not None and phonetic.text else ""

        self.state.result_visible = True
        self.result.headword = entry.word
        self.result.subtitle = f"{meaning.part_of_speech} {pronunciation}".strip()
        self.result.meaning = definition.definition

        if definition.example is None:
            self.result.example = ""
            self.result.example_visible = False
        else:
            self.result.example = definition.example
            self.result.example_visible = True

        self.result.synonyms = tuple(dict.fromkeys(meaning.synonyms))
        self.result.synonyms_visible = bool(self.result.synonyms)

        # Without any phonetic entry the previous audio state is kept
        if phonetic is not None:
            self._replace_audio(phonetic.audio if phonetic.has_audio else None)

        self.render()

    def apply_failure(self, seq: int, term: str, error: LookupFailure) -> None:
        """Show the not-found state after a failed lookup.

        The loaded pronunciation is kept.

        Args:
            seq: Sequence number of the request
            term: The looked-up term
            error: What went wrong
        """
        if self._is_stale(seq):
            logger.debug(f"Discarding stale failure for '{term}' (request {seq})")
            return

        logger.warning(f"Lookup failed for '{term}': {error}")
        self.presenter.notify(MessageLevel.DANGER, LOOKUP_FAILED_MESSAGE)
        self.state.info_html = not_found_message(term)
        self.state.result_visible = False
        self.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_term(raw: str) -> str:
        term = raw.strip()
        if not term:
            raise ValidationError("word is required")
        return term

    def _is_stale(self, seq: int) -> bool:
        return self.config.discard_stale_responses and seq != self.state.request_seq

    def _replace_audio(self, url: str | None) -> None:
        previous = self.state.current_audio
        if previous is not None:
            previous.stop()

        self.state.current_audio = self.audio_player.load(url) if url else None
        self.result.audio_visible = self.state.current_audio is not None
