"""Shared fixtures for the SiteCrew test suite."""

import pytest
from unittest.mock import patch

from sitecrew.agents.synthesizer import SYSTEM_PROMPT as SYNTHESIS_PROMPT
from sitecrew.errors import ServiceError
from sitecrew.graph import Orchestrator

SYNTHESIS_REPLY = (
    "```html\n"
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<!-- Generated by AI -->\n"
    "<body><h1>Northwind Bakery</h1></body>\n"
    "</html>\n"
    "```"
)


class FakeCompletionService:
    """Records every call and replies with a distinct message per call.

    fail_on is the 1-based index of the call that should raise ServiceError.
    """

    def __init__(self, fail_on=None, synthesis_reply=SYNTHESIS_REPLY):
        self.calls = []
        self.fail_on = fail_on
        self.synthesis_reply = synthesis_reply

    def complete(self, role_directive, user_message, max_output_length):
        self.calls.append(
            {
                "directive": role_directive,
                "message": user_message,
                "max_tokens": max_output_length,
            }
        )
        if self.fail_on == len(self.calls):
            raise ServiceError(503, "upstream unavailable")
        if role_directive == SYNTHESIS_PROMPT:
            return self.synthesis_reply
        return f"Persona reply #{len(self.calls)}."


@pytest.fixture
def fake_service():
    return FakeCompletionService()


@pytest.fixture
def orchestrator(fake_service):
    return Orchestrator(fake_service)


@pytest.fixture
def sample_discussion():
    return [
        {"agent": "Architect", "message": "Hero, menu, testimonials, contact."},
        {"agent": "Designer", "message": "Warm cream palette with serif headings."},
    ]


@pytest.fixture
def mock_config(tmp_path):
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "provider": "openai",
        "base_url": "https://gateway.test/v1",
        "api_key_env": "SITECREW_TEST_KEY",
        "persona_model": "test-persona-model",
        "synthesis_model": "test-synthesis-model",
        "temperature": 0.5,
        "persona_max_tokens": 300,
        "synthesis_max_tokens": 8000,
        "request_timeout": 30,
        "output_path": str(tmp_path / "site" / "index.html"),
    }
    with patch("sitecrew.config._config", test_config):
        yield test_config
