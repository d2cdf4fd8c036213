"""Integration tests: controller + FreeDictionaryProvider with a mocked HTTP layer."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from english_dictionary.controller import ImmediateScheduler, LookupController
from english_dictionary.models import DEFAULT_PROMPT
from english_dictionary.presenters import MessageLevel
from english_dictionary.services import FreeDictionaryProvider

GET_PATH = "english_dictionary.services.free_dictionary_provider.requests.get"


class FakeHttp:
    """requests.get replacement serving payloads by URL suffix."""

    def __init__(self, payloads):
        self.payloads = payloads
        self.urls = []

    def __call__(self, url, timeout=None):
        self.urls.append(url)
        term = url.rsplit("/", 1)[1]
        response = MagicMock()
        if term in self.payloads:
            response.status_code = 200
            response.json.return_value = self.payloads[term]
        else:
            response.status_code = 404
            response.json.return_value = {"title": "No Definitions Found"}
        return response


@pytest.fixture
def pipeline(test_config, recording_presenter, recording_view, audio_player, make_payload):
    provider = FreeDictionaryProvider(test_config.api_url, timeout=test_config.request_timeout)
    controller = LookupController(
        config=test_config,
        scheduler=ImmediateScheduler(provider),
        presenter=recording_presenter,
        audio_player=audio_player,
        view=recording_view,
    )
    http = FakeHttp(
        {
            "car": make_payload(),
            "automobile": make_payload(
                word="automobile",
                definition="A motor car.",
                example=None,
                synonyms=(),
                phonetics=({"text": "/ˈɔːtəməʊbiːl/", "audio": ""},),
            ),
        }
    )
    with patch(GET_PATH, side_effect=http):
        yield controller, http


class TestLookupPipeline:
    def test_search_synonym_then_clear(self, pipeline, recording_presenter, recording_view):
        controller, http = pipeline

        controller.handle_input_change("car")
        controller.handle_submit({"word": "car"})
        assert controller.result.audio_visible is True
        assert controller.result.synonyms == ("automobile", "vehicle")

        controller.handle_synonym_activated("automobile")
        assert controller.result.headword == "automobile"
        assert controller.result.subtitle == "noun /ˈɔːtəməʊbiːl/"
        assert controller.result.example_visible is False
        assert controller.result.synonyms_visible is False
        assert controller.result.audio_visible is False
        assert controller.state.current_audio is None
        assert recording_view.input_text == "automobile"

        controller.handle_clear()
        assert controller.state.info_html == DEFAULT_PROMPT
        assert controller.state.result_visible is False

        assert http.urls == [
            "https://dictionary.test/api/v2/entries/en/car",
            "https://dictionary.test/api/v2/entries/en/automobile",
        ]
        assert recording_presenter.notifications == []

    def test_not_found_then_found(self, pipeline, recording_presenter):
        controller, _ = pipeline

        controller.handle_submit({"word": "qwertyuiop"})
        assert recording_presenter.levels == [MessageLevel.DANGER]
        assert controller.state.result_visible is False

        controller.handle_submit({"word": "car"})
        assert controller.state.result_visible is True

    def test_network_down(self, test_config, recording_presenter, recording_view, audio_player):
        provider = FreeDictionaryProvider(test_config.api_url)
        controller = LookupController(
            test_config, ImmediateScheduler(provider), recording_presenter, audio_player, recording_view
        )
        with patch(GET_PATH, side_effect=requests.exceptions.ConnectionError):
            controller.handle_submit({"word": "car"})

        assert recording_presenter.levels == [MessageLevel.DANGER]
        assert 'Can\'t find the meaning of <b>"car"</b>' in controller.state.info_html
