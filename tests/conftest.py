"""Shared fixtures for the SmarterGPT test suite."""

from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from smartergpt.config import Settings
from smartergpt.conversation import Conversation


def _mock_llm_response(content):
    """Create a mock LLM response object."""
    response = MagicMock()
    response.content = content
    return response


def _make_llm(*replies):
    """Mock chat model whose invoke() yields each reply in turn.

    Strings become responses; exceptions are raised.
    """
    llm = MagicMock()
    llm.invoke.side_effect = [
        r if isinstance(r, BaseException) else _mock_llm_response(r) for r in replies
    ]
    return llm


def _api_status_error(status: int, message: str = "boom"):
    """Build the openai error the SDK raises for an HTTP error reply.

    Mirrors the SDK: exc.message is the "Error code: ..." dump and exc.body
    is the `error` object of the reply.
    """
    error = {"message": message, "type": "server_error" if status >= 500 else "invalid_request_error"}
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request, json={"error": error})
    dump = f"Error code: {status} - {{'error': {error}}}"
    if status == 429:
        return openai.RateLimitError(dump, response=response, body=error)
    return openai.APIStatusError(dump, response=response, body=error)


def _sent_messages(llm, call_index: int) -> list[dict]:
    """Messages passed to the nth llm.invoke call."""
    return llm.invoke.call_args_list[call_index].args[0]


@pytest.fixture
def mock_llm_response():
    return _mock_llm_response


@pytest.fixture
def make_llm():
    return _make_llm


@pytest.fixture
def api_status_error():
    return _api_status_error


@pytest.fixture
def sent_messages():
    return _sent_messages


@pytest.fixture
def settings():
    """Settings with a key configured and no rate-limit pause."""
    return Settings(
        api_key="test-key",
        model="gpt-test",
        temperature=0.5,
        number_of_requests=3,
        rate_limit_backoff_seconds=0,
        rate_limit_max_retries=2,
        request_timeout_seconds=5,
    )


@pytest.fixture
def conversation_for():
    """Factory: Conversation over a mocked LLM with zero back-off."""
    def _build(llm, max_rate_limit_retries=2):
        return Conversation(llm, max_rate_limit_retries=max_rate_limit_retries, rate_limit_backoff_seconds=0)
    return _build


@pytest.fixture
def base_state():
    """Minimal valid PipelineState."""
    return {
        "question": "What is 2+2?",
        "drafts": "",
        "critique": "",
        "resolution": "",
        "status": "in_progress",
    }


@pytest.fixture
def mock_config():
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "api_key_env": "SMARTERGPT_TEST_KEY",
        "model": "gpt-test",
        "temperature": 0.2,
        "number_of_requests": 2,
        "rate_limit_backoff_seconds": 1,
        "rate_limit_max_retries": 4,
        "request_timeout_seconds": 30,
        "output_path": "./output/answer.md",
    }
    with patch("smartergpt.config._config", test_config):
        yield test_config
