"""Completion service — one system + user message in, one text reply out.

The orchestrator only depends on ``complete(role_directive, user_message,
max_output_length)``; anything with that method can stand in for the
service (the tests use a recording fake).
"""

import os
import sys

import anthropic
import openai
from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from sitecrew.errors import ServiceError

VALID_PROVIDERS = {"openai", "anthropic"}


def _content_text(content) -> str:
    """Flatten a chat model reply to plain text (Anthropic may return blocks)."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


class CompletionService:
    """Chat-completion client over a LangChain chat model.

    A fresh model is built for every call so each call can carry its own
    output budget. Client-side retries are disabled: a failed call surfaces
    as a single ServiceError.
    """

    def __init__(
        self,
        model: str,
        api_key: str | None,
        provider: str = "openai",
        base_url: str | None = None,
        temperature: float = 0.7,
        timeout: float | None = None,
    ):
        if provider not in VALID_PROVIDERS:
            raise ValueError(
                f"Unknown provider '{provider}'. Must be one of: {VALID_PROVIDERS}"
            )
        self.model = model
        self.provider = provider
        self._api_key = api_key
        self._base_url = base_url
        self._temperature = temperature
        self._timeout = timeout

    def _chat_model(self, max_tokens: int):
        if self.provider == "anthropic":
            kwargs = {}
            if self._api_key:
                kwargs["api_key"] = self._api_key
            if self._base_url:
                kwargs["base_url"] = self._base_url
            return ChatAnthropic(
                model=self.model,
                temperature=self._temperature,
                max_tokens=max_tokens,
                timeout=self._timeout,
                max_retries=0,
                **kwargs,
            )
        return ChatOpenAI(
            model=self.model,
            api_key=self._api_key,
            base_url=self._base_url,
            temperature=self._temperature,
            max_tokens=max_tokens,
            timeout=self._timeout,
            max_retries=0,
        )

    def complete(self, role_directive: str, user_message: str, max_output_length: int) -> str:
        """Send one system + user exchange and return the reply text.

        Raises ServiceError if the remote call does not succeed.
        """
        llm = self._chat_model(max_output_length)
        messages = [
            {"role": "system", "content": role_directive},
            {"role": "user", "content": user_message},
        ]
        try:
            response = llm.invoke(messages)
        except (openai.APIError, anthropic.APIError) as exc:
            status_code = getattr(exc, "status_code", None)
            body = getattr(exc, "body", None)
            if body is None:
                body = str(exc)
            print(
                f"[SiteCrew] Completion service error: {status_code} {body}",
                file=sys.stderr,
            )
            raise ServiceError(status_code, body) from exc

        return _content_text(response.content)


def build_completion_service(config: dict, model_key: str = "persona_model") -> CompletionService:
    """Build a CompletionService from the loaded config.

    The credential is read from the environment variable named by
    ``api_key_env``. A missing credential is left for the provider to reject.
    """
    api_key = os.environ.get(config.get("api_key_env", "SITECREW_API_KEY"))
    return CompletionService(
        model=config[model_key],
        api_key=api_key,
        provider=config.get("provider", "openai"),
        base_url=config.get("base_url"),
        temperature=config.get("temperature", 0.7),
        timeout=config.get("request_timeout"),
    )
