"""Pytest configuration and shared fixtures."""

import asyncio
from unittest.mock import MagicMock

import pytest

from word_lookup.config import ConfigFileManager, LookupConfig
from word_lookup.models import ProviderId, ProviderResponse
from word_lookup.presenters import NullPresenter
from word_lookup.services import (
    LexicalaTransformer,
    LookupManager,
    LookupService,
    ManagerConfig,
    WordCache,
)


@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path, monkeypatch):
    """Point the saved-config location at a temporary directory."""
    path = tmp_path / ".word_lookup" / "config.json"
    monkeypatch.setattr(ConfigFileManager, "CONFIG_FILE", path)
    return path


@pytest.fixture
def test_config():
    """Provide a test configuration with a dummy key and no backoff wait."""
    return LookupConfig(
        provider=ProviderId.LEXICALA,
        api_endpoint="https://lexicala1.p.rapidapi.com",
        api_key="test-key",
        timeout_ms=2000,
        retry_attempts=2,
        backoff_unit_seconds=0.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def lexicala_payload():
    """Provide a Lexicala search-entries response for 'straw'."""
    return {
        "n_results": 1,
        "page_number": 1,
        "results_per_page": 10,
        "available_n_pages": 1,
        "results": [
            {
                "id": "EN_DE00045678",
                "language": "en",
                "headword": {
                    "text": "Straw",
                    "pos": "noun",
                    "pronunciation": {"value": "strɔː"},
                },
                "frequency": "215629",
                "senses": [
                    {
                        "id": "EN_SE00045679",
                        "definition": "dried stalks of grain",
                        "examples": [{"text": "a bale of straw"}],
                        "synonyms": ["hay"],
                    },
                    {
                        "id": "EN_SE00045680",
                        "definition": "a thin tube for sucking up a drink",
                        "examples": [{"text": "drink through a straw"}, {"text": "a bale of straw"}],
                        "synonyms": ["hay", "pipe"],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def free_dictionary_payload():
    """Provide a dictionaryapi.dev response for 'hello'."""
    return [
        {
            "word": "hello",
            "phonetic": "həˈləʊ",
            "phonetics": [{"text": "həˈləʊ", "audio": ""}],
            "meanings": [
                {
                    "partOfSpeech": "exclamation",
                    "definitions": [
                        {
                            "definition": "used as a greeting",
                            "example": "hello there, Katie!",
                            "synonyms": [],
                            "antonyms": [],
                        }
                    ],
                    "synonyms": ["hi"],
                    "antonyms": ["bye"],
                },
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {
                            "definition": "an utterance of 'hello'; a greeting",
                            "example": "she was getting polite nods and hellos",
                            "synonyms": ["greeting"],
                            "antonyms": [],
                        }
                    ],
                    "synonyms": [],
                    "antonyms": [],
                },
            ],
        }
    ]


@pytest.fixture
def make_response():
    """Factory fixture for requests.Response stand-ins."""

    def _make(status_code=200, payload=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make


class ScriptedClient:
    """A ProviderClient that replays a fixed list of outcomes.

    Each call consumes the next outcome; the last one repeats. An outcome
    that is an exception is raised, anything else is returned as payload.
    Every call yields to the event loop once before answering.
    """

    def __init__(self, outcomes, provider_id=ProviderId.LEXICALA, available=True):
        self.provider_id = provider_id
        self.outcomes = list(outcomes)
        self.available = available
        self.calls = []

    @property
    def name(self) -> str:
        return "Scripted API"

    def is_available(self) -> bool:
        return self.available

    async def search_word(self, params, timeout=None):
        self.calls.append((params, timeout))
        await asyncio.sleep(0)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return ProviderResponse(payload=outcome, source=self.name)


@pytest.fixture
def make_client():
    """Factory fixture for scripted provider clients."""
    return ScriptedClient


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def recording_sleep():
    """Provide a sleep that returns immediately and records its delays."""
    return RecordingSleep()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    """Provide a clock that only moves when told to."""
    return FakeClock()


@pytest.fixture
def make_manager(recording_sleep):
    """Factory fixture for a LookupManager wired to one client and the Lexicala transformer."""

    def _make(client, retry_attempts=2, transformer=True):
        manager = LookupManager(
            ManagerConfig(primary_provider=client.provider_id, retry_attempts=retry_attempts),
            sleep=recording_sleep,
        )
        manager.add_client(client.provider_id, client)
        if transformer:
            manager.add_transformer(client.provider_id, LexicalaTransformer())
        return manager

    return _make


@pytest.fixture
def make_service(make_manager, fake_clock):
    """Factory fixture for a LookupService over a scripted client and fake clock."""

    def _make(client, retry_attempts=2, disabled=False):
        manager = make_manager(client, retry_attempts=retry_attempts)
        return LookupService(manager, WordCache(clock=fake_clock), disabled=disabled)

    return _make
