import httpx
import pytest
from types import SimpleNamespace

from openai import APIConnectionError, APITimeoutError

from app.agents import fallback_agent
from app.core import config
from app.services.llm import get_client

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeCompletions:
    def __init__(self, content=None, error=None, no_choices=False):
        self.content = content
        self.error = error
        self.no_choices = no_choices
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        if self.no_choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _install(monkeypatch, completions):
    monkeypatch.setattr(config.settings, "OPENAI_API_KEY", "sk-test", raising=False)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(fallback_agent, "get_client", lambda: client)


def test_completion_is_trimmed(monkeypatch):
    completions = FakeCompletions(content="  Try thrifting first!  \n")
    _install(monkeypatch, completions)

    out = fallback_agent.handle("what should I wear?")
    assert out.reply == "Try thrifting first!"
    assert out.image is None


def test_completion_request_shape(monkeypatch):
    completions = FakeCompletions(content="ok")
    _install(monkeypatch, completions)

    fallback_agent.handle("tell me a joke")
    (call,) = completions.calls
    assert call["max_tokens"] == config.settings.OPENAI_MAX_TOKENS
    assert call["temperature"] == config.settings.OPENAI_TEMPERATURE
    assert call["messages"] == [
        {"role": "system", "content": fallback_agent.SYSTEM},
        {"role": "user", "content": "tell me a joke"},
    ]


@pytest.mark.parametrize(
    "error",
    [APITimeoutError(request=REQUEST), APIConnectionError(request=REQUEST)],
)
def test_provider_errors_become_apology(monkeypatch, error):
    _install(monkeypatch, FakeCompletions(error=error))
    assert fallback_agent.handle("hmm").reply == fallback_agent.UNAVAILABLE_REPLY


def test_empty_completion_becomes_apology(monkeypatch):
    _install(monkeypatch, FakeCompletions(content="   "))
    assert fallback_agent.handle("hmm").reply == fallback_agent.UNAVAILABLE_REPLY


def test_completion_without_choices_becomes_apology(monkeypatch):
    _install(monkeypatch, FakeCompletions(no_choices=True))
    assert fallback_agent.handle("hmm").reply == fallback_agent.UNAVAILABLE_REPLY


def test_missing_api_key_skips_provider(monkeypatch):
    monkeypatch.setattr(config.settings, "OPENAI_API_KEY", "", raising=False)

    def boom():
        raise AssertionError("provider must not be called")

    monkeypatch.setattr(fallback_agent, "get_client", boom)
    assert fallback_agent.handle("hmm").reply == fallback_agent.UNAVAILABLE_REPLY


def test_client_has_timeout_and_no_retries(monkeypatch):
    monkeypatch.setattr(config.settings, "OPENAI_API_KEY", "sk-test", raising=False)
    client = get_client()
    assert client.max_retries == 0
    assert client.timeout == config.settings.OPENAI_TIMEOUT
