"""Tests for LexicalaProvider and FreeDictionaryProvider."""

import asyncio
import time
from unittest.mock import MagicMock

import pytest
import requests

from word_lookup.exceptions import ConfigurationError, DictionaryError, ErrorCode
from word_lookup.models import ProviderId, SearchParams
from word_lookup.services import ConnectivityMonitor, FreeDictionaryProvider, LexicalaProvider


@pytest.fixture
def session():
    """Provide a mocked requests session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def lexicala(session):
    """Provide a LexicalaProvider over the mocked session."""
    return LexicalaProvider("https://lexicala1.p.rapidapi.com/", "test-key", session=session)


def search(client, word="straw", target_language="en", timeout=None):
    return asyncio.run(client.search_word(SearchParams(word, target_language=target_language), timeout=timeout))


class TestLexicalaProvider:
    """Tests for LexicalaProvider."""

    def test_requires_endpoint_and_key(self):
        """Test construction fails without credentials."""
        with pytest.raises(ConfigurationError, match="endpoint and API key are required"):
            LexicalaProvider("https://lexicala1.p.rapidapi.com", "")
        with pytest.raises(ConfigurationError):
            LexicalaProvider("", "key")

    def test_identity(self, lexicala):
        """Test provider id and display name."""
        assert lexicala.provider_id is ProviderId.LEXICALA
        assert lexicala.name == "Lexicala API"
        assert lexicala.is_available() is True

    def test_search_success(self, lexicala, session, make_response, lexicala_payload):
        """Test a successful search returns the raw payload."""
        session.get.return_value = make_response(200, lexicala_payload)

        response = search(lexicala, "straw", "en")

        assert response.payload == lexicala_payload
        assert response.source == "Lexicala API"

    def test_request_shape(self, lexicala, session, make_response, lexicala_payload):
        """Test URL, query parameters and RapidAPI headers."""
        session.get.return_value = make_response(200, lexicala_payload)

        search(lexicala, "  straw ", "es", timeout=3.0)

        args, kwargs = session.get.call_args
        assert args[0] == "https://lexicala1.p.rapidapi.com/search-entries"
        assert kwargs["params"] == {"text": "straw", "language": "es", "source": "password"}
        assert kwargs["headers"]["X-RapidAPI-Key"] == "test-key"
        assert kwargs["headers"]["X-RapidAPI-Host"] == "lexicala1.p.rapidapi.com"
        assert kwargs["timeout"] == 3.0

    def test_default_target_language(self, lexicala, session, make_response, lexicala_payload):
        """Test a missing target language is sent as English."""
        session.get.return_value = make_response(200, lexicala_payload)

        asyncio.run(lexicala.search_word(SearchParams("straw")))

        assert session.get.call_args.kwargs["params"]["language"] == "en"

    @pytest.mark.parametrize("word", ["", "   "])
    def test_blank_word_is_invalid(self, lexicala, session, word):
        """Test blank words fail before any request."""
        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala, word)

        assert exc_info.value.code is ErrorCode.INVALID_REQUEST
        session.get.assert_not_called()

    def test_empty_results_not_found(self, lexicala, session, make_response):
        """Test an empty result set is WORD_NOT_FOUND."""
        session.get.return_value = make_response(200, {"n_results": 0, "results": []})

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala, "qwxz")

        assert exc_info.value.code is ErrorCode.WORD_NOT_FOUND
        assert exc_info.value.details["word"] == "qwxz"

    def test_404_not_found(self, lexicala, session, make_response):
        """Test HTTP 404 is WORD_NOT_FOUND."""
        session.get.return_value = make_response(404, {})

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.WORD_NOT_FOUND

    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    def test_other_status_is_api_error(self, lexicala, session, make_response, status):
        """Test non-404 failures are API_ERROR with the status in the message."""
        session.get.return_value = make_response(status, {})

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.API_ERROR
        assert str(status) in exc_info.value.message

    def test_malformed_body_is_api_error(self, lexicala, session, make_response):
        """Test undecodable JSON is API_ERROR."""
        session.get.return_value = make_response(200, json_error=ValueError("Expecting value"))

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.API_ERROR

    def test_connection_error_is_network_error(self, lexicala, session):
        """Test connection failures are NETWORK_ERROR."""
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.NETWORK_ERROR

    def test_requests_timeout_is_timeout(self, lexicala, session):
        """Test a requests timeout is TIMEOUT."""
        session.get.side_effect = requests.exceptions.ReadTimeout("slow")

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.TIMEOUT

    def test_deadline_is_timeout(self, lexicala, session, make_response, lexicala_payload):
        """Test a round trip exceeding the deadline is TIMEOUT."""

        def slow_get(*args, **kwargs):
            time.sleep(0.3)
            return make_response(200, lexicala_payload)

        session.get.side_effect = slow_get

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala, timeout=0.05)

        assert exc_info.value.code is ErrorCode.TIMEOUT

    def test_other_request_exception_is_api_error(self, lexicala, session):
        """Test unclassified requests failures are API_ERROR."""
        session.get.side_effect = requests.exceptions.TooManyRedirects("loop")

        with pytest.raises(DictionaryError) as exc_info:
            search(lexicala)

        assert exc_info.value.code is ErrorCode.API_ERROR


class TestConnectivity:
    """Tests for availability following connectivity events."""

    def test_offline_fails_without_request(self, session):
        """Test an offline client raises NETWORK_ERROR and sends nothing."""
        monitor = ConnectivityMonitor()
        client = LexicalaProvider("https://lexicala1.p.rapidapi.com", "key", session=session, connectivity=monitor)

        monitor.set_online(False)

        assert client.is_available() is False
        with pytest.raises(DictionaryError) as exc_info:
            search(client)
        assert exc_info.value.code is ErrorCode.NETWORK_ERROR
        session.get.assert_not_called()

    def test_back_online(self, session):
        """Test availability returns with connectivity."""
        monitor = ConnectivityMonitor(online=False)
        client = FreeDictionaryProvider(session=session, connectivity=monitor)
        assert client.is_available() is False

        monitor.set_online(True)

        assert client.is_available() is True

    def test_close_releases_subscription(self, session):
        """Test close unsubscribes and leaves a caller-owned session open."""
        monitor = ConnectivityMonitor()
        client = FreeDictionaryProvider(session=session, connectivity=monitor)
        assert monitor.listener_count == 1

        client.close()

        assert monitor.listener_count == 0
        session.close.assert_not_called()

    def test_context_manager_closes(self, session):
        """Test leaving the with-block closes the client."""
        monitor = ConnectivityMonitor()
        with FreeDictionaryProvider(session=session, connectivity=monitor):
            assert monitor.listener_count == 1
        assert monitor.listener_count == 0


class TestFreeDictionaryProvider:
    """Tests for FreeDictionaryProvider."""

    def test_identity(self, session):
        """Test provider id and display name."""
        client = FreeDictionaryProvider(session=session)
        assert client.provider_id is ProviderId.FREE_DICTIONARY
        assert client.name == "Free Dictionary API"

    def test_request_shape(self, session, make_response, free_dictionary_payload):
        """Test language and word travel as path segments without a query."""
        session.get.return_value = make_response(200, free_dictionary_payload)
        client = FreeDictionaryProvider("https://api.dictionaryapi.dev/api/v2/entries/", session=session)

        response = search(client, "ice cream")

        args, kwargs = session.get.call_args
        assert args[0] == "https://api.dictionaryapi.dev/api/v2/entries/en/ice%20cream"
        assert kwargs["params"] is None
        assert "X-Api-Key" not in kwargs["headers"]
        assert response.payload == free_dictionary_payload

    def test_no_definitions_found(self, session, make_response):
        """Test the service's 404 body is WORD_NOT_FOUND."""
        session.get.return_value = make_response(
            404, {"title": "No Definitions Found", "message": "Sorry pal", "resolution": ""}
        )
        client = FreeDictionaryProvider(session=session)

        with pytest.raises(DictionaryError) as exc_info:
            search(client, "qwxz")

        assert exc_info.value.code is ErrorCode.WORD_NOT_FOUND

    def test_object_instead_of_list_not_found(self, session, make_response):
        """Test a 200 response without an entry list is WORD_NOT_FOUND."""
        session.get.return_value = make_response(200, {"title": "No Definitions Found"})
        client = FreeDictionaryProvider(session=session)

        with pytest.raises(DictionaryError) as exc_info:
            search(client, "qwxz")

        assert exc_info.value.code is ErrorCode.WORD_NOT_FOUND
