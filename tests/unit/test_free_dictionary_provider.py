"""Tests for FreeDictionaryProvider."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from english_dictionary.exceptions import (
    LookupFailure,
    LookupNetworkError,
    MalformedResponseError,
    WordNotFoundError,
)
from english_dictionary.services.free_dictionary_provider import FreeDictionaryProvider

GET_PATH = "english_dictionary.services.free_dictionary_provider.requests.get"


def _response(status_code=200, payload=None, json_error=None):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = payload
    return mock_response


class TestFreeDictionaryProvider:
    """Tests for FreeDictionaryProvider."""

    def test_lookup_success(self, make_payload):
        """Test successful lookup via mocked API."""
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, return_value=_response(payload=make_payload())) as mock_get:
            entries = provider.lookup("car")

        mock_get.assert_called_once_with(
            "https://api.dictionaryapi.dev/api/v2/entries/en/car", timeout=10.0
        )
        assert len(entries) == 1
        assert entries[0].word == "car"
        assert entries[0].first_definition.definition == "A road vehicle."

    def test_term_is_percent_encoded(self, make_payload):
        provider = FreeDictionaryProvider("https://dictionary.test/entries/en/")
        with patch(GET_PATH, return_value=_response(payload=make_payload())) as mock_get:
            provider.lookup("ice cream/sundae")

        url = mock_get.call_args.args[0]
        assert url == "https://dictionary.test/entries/en/ice%20cream%2Fsundae"

    def test_custom_timeout(self, make_payload):
        provider = FreeDictionaryProvider(timeout=2.5)
        with patch(GET_PATH, return_value=_response(payload=make_payload())) as mock_get:
            provider.lookup("car")

        assert mock_get.call_args.kwargs["timeout"] == 2.5

    def test_uses_session_when_given(self, make_payload):
        session = MagicMock()
        session.get.return_value = _response(payload=make_payload())
        provider = FreeDictionaryProvider(session=session)

        with patch(GET_PATH) as mock_get:
            provider.lookup("car")

        session.get.assert_called_once()
        mock_get.assert_not_called()

    def test_404_raises_word_not_found(self):
        provider = FreeDictionaryProvider()
        body = {"title": "No Definitions Found", "message": "Sorry pal"}
        with patch(GET_PATH, return_value=_response(404, body)):
            with pytest.raises(WordNotFoundError) as exc_info:
                provider.lookup("qwertyuiop")

        assert exc_info.value.term == "qwertyuiop"

    def test_server_error_raises_lookup_failure(self):
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, return_value=_response(500)):
            with pytest.raises(LookupFailure, match="HTTP 500"):
                provider.lookup("car")

    def test_timeout_raises_network_error(self):
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, side_effect=requests.exceptions.Timeout):
            with pytest.raises(LookupNetworkError, match="timed out"):
                provider.lookup("car")

    def test_connection_error_raises_network_error(self):
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(LookupNetworkError):
                provider.lookup("car")

    def test_non_json_body(self):
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, return_value=_response(json_error=ValueError("bad json"))):
            with pytest.raises(MalformedResponseError):
                provider.lookup("car")

    def test_empty_list_body(self):
        provider = FreeDictionaryProvider()
        with patch(GET_PATH, return_value=_response(payload=[])):
            with pytest.raises(MalformedResponseError) as exc_info:
                provider.lookup("car")

        assert exc_info.value.term == "car"

    def test_failures_share_base_class(self):
        """Every provider error can be caught as LookupFailure."""
        for error in (LookupNetworkError, WordNotFoundError, MalformedResponseError):
            assert issubclass(error, LookupFailure)

    def test_name_property(self):
        assert FreeDictionaryProvider().name == "Free Dictionary API"
