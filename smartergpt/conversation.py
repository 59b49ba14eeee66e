"""Conversation: the dialogue log replayed to the completion provider on every turn.

One Conversation belongs to one pipeline run. A turn is committed to the log
(user message + assistant reply) only when the provider returns usable text;
failed turns leave the log exactly as it was.
"""

import sys

from langchain_openai import ChatOpenAI

from smartergpt.config import Settings
from smartergpt.state import Message, Role, TurnResult
from smartergpt.utils.parsing import describe_error, extract_text, invoke_with_retry

MALFORMED_REPLY = "The completion reply did not contain any message content"


class Conversation:
    def __init__(
        self,
        llm,
        max_rate_limit_retries: int | None = 5,
        rate_limit_backoff_seconds: float = 20.0,
    ):
        self._llm = llm
        self._max_rate_limit_retries = max_rate_limit_retries
        self._rate_limit_backoff_seconds = rate_limit_backoff_seconds
        self._messages: list[Message] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "Conversation":
        """Build a Conversation backed by the configured OpenAI chat model."""
        llm = ChatOpenAI(
            model=settings.model,
            temperature=settings.temperature,
            api_key=settings.api_key,
            timeout=settings.request_timeout_seconds,
            max_retries=0,  # rate limits are retried by invoke_with_retry
        )
        return cls(
            llm,
            max_rate_limit_retries=settings.rate_limit_max_retries,
            rate_limit_backoff_seconds=settings.rate_limit_backoff_seconds,
        )

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def reset(self) -> None:
        self._messages.clear()

    def submit_turn(self, content: str, reset: bool = False) -> TurnResult:
        """Send `content` as the next user turn and return the provider's reply.

        With reset=True the log is cleared first. Rate-limited requests are
        resent with the same content by invoke_with_retry; the reset is not
        applied again between attempts. Errors never raise: they come back
        as a failed TurnResult whose text is the diagnostic.
        """
        if reset:
            self.reset()

        user_message = Message(Role.USER, content)
        payload = [m.to_dict() for m in self._messages] + [user_message.to_dict()]

        try:
            response = invoke_with_retry(
                self._llm,
                payload,
                max_retries=self._max_rate_limit_retries,
                backoff_seconds=self._rate_limit_backoff_seconds,
            )
        except Exception as exc:
            diagnostic = describe_error(exc)
            print(f"[SmartGPT] {diagnostic}", file=sys.stderr)
            return TurnResult(diagnostic, failed=True)

        text = extract_text(response)
        if text is None:
            print(f"[SmartGPT] {MALFORMED_REPLY}", file=sys.stderr)
            return TurnResult(MALFORMED_REPLY, failed=True)

        self._messages.append(user_message)
        self._messages.append(Message(Role.ASSISTANT, text))
        return TurnResult(text)
