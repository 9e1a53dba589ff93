from types import SimpleNamespace

import httpx
import pytest
from openai import APITimeoutError

from ado_generator.errors import ModelInvocationError
from ado_generator.llm_utils import LLMResponse, OpenAIChatLLM, extract_primary_text


class FakeCompletions:
    def __init__(self, result):
        self.result = result
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def fake_client(result):
    completions = FakeCompletions(result)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_extract_primary_text_from_sdk_object() -> None:
    assert extract_primary_text(completion("hello")) == "hello"


def test_extract_primary_text_from_dict() -> None:
    assert extract_primary_text({"choices": [{"message": {"content": "hi"}}]}) == "hi"


@pytest.mark.parametrize(
    "raw",
    [
        None,
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {"content": None}}]},
        completion(None),
    ],
)
def test_extract_primary_text_missing(raw) -> None:
    assert extract_primary_text(raw) is None


def test_invoke_passes_model_settings() -> None:
    client, completions = fake_client(completion('"crowdfund"'))
    llm = OpenAIChatLLM(model="gpt-4o", temperature=0.1, timeout=12, client=client)
    messages = [{"role": "user", "content": "x"}]

    response = llm.invoke(messages)

    assert isinstance(response, LLMResponse)
    assert response.primary_text == '"crowdfund"'
    assert completions.kwargs == {"model": "gpt-4o", "messages": messages, "temperature": 0.1, "timeout": 12}


def test_timeout_becomes_model_invocation_error() -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client, _ = fake_client(APITimeoutError(request=request))

    with pytest.raises(ModelInvocationError, match="APITimeoutError"):
        OpenAIChatLLM(client=client).invoke([{"role": "user", "content": "x"}])


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        OpenAIChatLLM(api_key=None)
