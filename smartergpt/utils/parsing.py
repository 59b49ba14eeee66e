"""Shared parsing and LLM utilities for completion replies."""

import sys

import httpx
import openai
from tenacity import retry, retry_if_exception, stop_after_attempt, stop_never, wait_fixed

RATE_LIMIT_STATUS = 429


def status_code_of(exc: BaseException) -> int | None:
    """Return the HTTP status carried by a provider error, if any."""
    if isinstance(exc, openai.APIStatusError):
        return exc.status_code
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def _is_rate_limited(exc: BaseException) -> bool:
    """Return True if the provider asked us to slow down."""
    return status_code_of(exc) == RATE_LIMIT_STATUS


def describe_error(exc: BaseException) -> str:
    """Render a provider error as the diagnostic text returned to callers."""
    status = status_code_of(exc)
    if status is None:
        return f"Error with completion request: {exc}"

    return f"Error with completion request: {status}, {_provider_message(exc)}"


def _provider_message(exc: BaseException) -> str:
    """Pull the provider's own error text out of a status error.

    The openai SDK stores the `error` object of the reply body in exc.body;
    exc.message is its "Error code: ..." dump of the whole body.
    """
    if not isinstance(exc, openai.APIStatusError):
        return str(exc)

    body = exc.body
    if isinstance(body, dict):
        body = body.get("error", body)
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return exc.message


def extract_text(response) -> str | None:
    """Return the reply text, or None when the reply carries no usable content."""
    content = getattr(response, "content", None)
    if not isinstance(content, str) or not content:
        return None
    return content


def invoke_with_retry(llm, messages, max_retries: int | None = 5, backoff_seconds: float = 20.0):
    """Call llm.invoke(messages), pausing and resending while the provider rate-limits.

    Only HTTP 429 is retried, with a fixed pause between attempts.
    max_retries=None keeps retrying for as long as the provider rate-limits.
    Every other error, and the last 429 once retries are exhausted, is raised.
    """
    stop = stop_never if max_retries is None else stop_after_attempt(max_retries + 1)
    limit = "unbounded" if max_retries is None else max_retries

    @retry(
        stop=stop,  # first attempt counts
        wait=wait_fixed(backoff_seconds),
        retry=retry_if_exception(_is_rate_limited),
        reraise=True,
        before_sleep=lambda state: print(
            f"[SmartGPT] Rate limited: {describe_error(state.outcome.exception())}. "
            f"Retrying in {state.next_action.sleep:.0f}s "
            f"(attempt {state.attempt_number}/{limit})...",
            file=sys.stderr,
        ),
    )
    def _invoke():
        return llm.invoke(messages)

    return _invoke()
