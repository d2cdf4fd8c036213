"""Pytest configuration and shared fixtures."""

import pytest

from english_dictionary.config import DictionaryConfig
from english_dictionary.controller import ImmediateScheduler, LookupController
from english_dictionary.exceptions import LookupFailure, WordNotFoundError
from english_dictionary.models import parse_entries
from english_dictionary.presenters import MessageLevel

CAR_PAYLOAD = [
    {
        "word": "car",
        "phonetics": [{"text": "/kɑː/", "audio": "https://x/car.mp3"}],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [{"definition": "A road vehicle.", "example": "He drove the car."}],
                "synonyms": ["automobile", "vehicle"],
            }
        ],
    }
]


@pytest.fixture
def test_config():
    """Provide a test configuration."""
    return DictionaryConfig(
        api_url="https://dictionary.test/api/v2/entries/en",
        request_timeout=1.0,
    )


@pytest.fixture
def make_payload():
    """Factory fixture for entries payloads with sensible defaults.

    example=None leaves the example key out of the definition.
    """

    def _make(
        word="car",
        part_of_speech="noun",
        definition="A road vehicle.",
        example="He drove the car.",
        synonyms=("automobile", "vehicle"),
        phonetics=({"text": "/kɑː/", "audio": "https://x/car.mp3"},),
    ):
        definition_obj = {"definition": definition}
        if example is not None:
            definition_obj["example"] = example
        return [
            {
                "word": word,
                "phonetics": list(phonetics),
                "meanings": [
                    {
                        "partOfSpeech": part_of_speech,
                        "definitions": [definition_obj],
                        "synonyms": list(synonyms),
                    }
                ],
            }
        ]

    return _make


class RecordingPresenter:
    """A real PresenterProtocol implementation that records notifications."""

    def __init__(self):
        self.notifications = []

    def notify(self, level, message):
        self.notifications.append((level, message))

    def show_info(self, message):
        self.notify(MessageLevel.INFO, message)

    def show_success(self, message):
        self.notify(MessageLevel.SUCCESS, message)

    def show_warning(self, message):
        self.notify(MessageLevel.WARNING, message)

    def show_error(self, message):
        self.notify(MessageLevel.DANGER, message)

    @property
    def levels(self):
        return [level for level, _ in self.notifications]


class RecordingView:
    """A LookupView that records what it was asked to show."""

    def __init__(self):
        self.renders = 0
        self.state = None
        self.result = None
        self.input_text = None
        self.focused = False
        self.info_history = []

    def render(self, state, result):
        self.renders += 1
        self.state = state
        self.result = result
        self.info_history.append(state.info_html)

    def set_input_text(self, text):
        self.input_text = text

    def focus_input(self):
        self.focused = True


class FakeAudioHandle:
    def __init__(self, source):
        self.source = source
        self.plays = 0
        self.stopped = False

    def play(self):
        self.plays += 1

    def stop(self):
        self.stopped = True


class FakeAudioPlayer:
    """AudioPlayer that hands out recording handles."""

    def __init__(self):
        self.loaded = []

    def load(self, url):
        handle = FakeAudioHandle(url)
        self.loaded.append(handle)
        return handle


class FakeProvider:
    """DictionaryProvider serving canned payloads keyed by term."""

    name = "Fake"

    def __init__(self, payloads=None):
        self.payloads = dict(payloads or {})
        self.calls = []

    def lookup(self, term):
        self.calls.append(term)
        if term not in self.payloads:
            raise WordNotFoundError(f"No definitions found for '{term}'", term)
        payload = self.payloads[term]
        if isinstance(payload, LookupFailure):
            raise payload
        return parse_entries(payload)


class ManualScheduler:
    """LookupScheduler that holds requests until the test resolves them."""

    def __init__(self, provider):
        self.provider = provider
        self.pending = []

    def schedule(self, term, on_success, on_failure):
        self.pending.append((term, on_success, on_failure))

    def resolve(self, index=0):
        term, on_success, on_failure = self.pending.pop(index)
        try:
            entries = self.provider.lookup(term)
        except LookupFailure as e:
            on_failure(e)
            return
        on_success(entries)


@pytest.fixture
def recording_presenter():
    return RecordingPresenter()


@pytest.fixture
def recording_view():
    return RecordingView()


@pytest.fixture
def audio_player():
    return FakeAudioPlayer()


@pytest.fixture
def fake_provider():
    return FakeProvider({"car": CAR_PAYLOAD})


@pytest.fixture
def make_controller(test_config, recording_presenter, recording_view, audio_player, fake_provider):
    """Factory fixture for controllers wired to recording fakes."""

    def _make(config=None, scheduler=None):
        return LookupController(
            config=config or test_config,
            scheduler=scheduler or ImmediateScheduler(fake_provider),
            presenter=recording_presenter,
            audio_player=audio_player,
            view=recording_view,
        )

    return _make


@pytest.fixture
def manual_scheduler(fake_provider):
    """Scheduler whose requests are resolved explicitly by the test."""
    return ManualScheduler(fake_provider)
