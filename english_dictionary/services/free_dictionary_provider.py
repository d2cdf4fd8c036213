"""Free Dictionary API provider."""

import logging
from urllib.parse import quote

import requests

from english_dictionary.exceptions import (
    LookupFailure,
    LookupNetworkError,
    MalformedResponseError,
    WordNotFoundError,
)
from english_dictionary.models import LexicalEntry, parse_entries

logger = logging.getLogger(__name__)


class FreeDictionaryProvider:
    """Online dictionary provider using the dictionaryapi.dev entries endpoint.

    Implements DictionaryProvider protocol.
    """

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        """Initialize with API URL and request timeout.

        Args:
            api_url: Base URL of the entries endpoint, without trailing slash.
            timeout: Seconds to wait for the service before giving up.
            session: Optional requests session to reuse connections.
        """
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = session

    @property
    def name(self) -> str:
        return "Free Dictionary API"

    def build_url(self, term: str) -> str:
        """Build the request URL for a term, percent-encoding it."""
        return f"{self._api_url}/{quote(term, safe='')}"

    def lookup(self, term: str) -> list[LexicalEntry]:
        """Look up a word via the Free Dictionary API.

        Args:
            term: English word to look up.

        Returns:
            Parsed lexical entries.

        Raises:
            LookupNetworkError: If the request fails or times out.
            WordNotFoundError: If the service answers 404.
            LookupFailure: For any other non-2xx status.
            MalformedResponseError: If the body has no usable entry.
        """
        url = self.build_url(term)
        getter = self._session.get if self._session is not None else requests.get
        logger.debug(f"GET {url}")

        try:
            response = getter(url, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise LookupNetworkError(f"Request for '{term}' timed out", term) from e
        except requests.RequestException as e:
            raise LookupNetworkError(f"Request for '{term}' failed: {e}", term) from e

        if response.status_code == 404:
            raise WordNotFoundError(f"No definitions found for '{term}'", term)
        if not 200 <= response.status_code < 300:
            raise LookupFailure(
                f"Dictionary service returned HTTP {response.status_code} for '{term}'", term
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response for '{term}' is not JSON", term) from e

        try:
            entries = parse_entries(payload)
        except MalformedResponseError as e:
            e.term = term
            raise

        logger.info(f"Found {len(entries)} entries for '{term}'")
        return entries
