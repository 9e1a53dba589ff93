"""
LLM Utilities - OpenAI client wrapper and response parsing

Anything with an `invoke(messages) -> LLMResponse` method can stand in for
OpenAIChatLLM; the pipeline never touches the OpenAI SDK directly.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from .errors import ModelInvocationError


@dataclass
class LLMResponse:
    """Model answer: the text we care about plus the untouched response"""
    primary_text: Optional[str]
    raw: Any = None


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj[name]
    return getattr(obj, name)


def extract_primary_text(raw: Any) -> Optional[str]:
    """
    Read `choices[0].message.content` from a chat completion.

    Works on SDK response objects and on plain dicts. Returns None when any
    step of the path is missing.
    """
    try:
        content = _field(_field(_field(raw, "choices")[0], "message"), "content")
    except (KeyError, IndexError, AttributeError, TypeError):
        return None
    return content if isinstance(content, str) else None


class OpenAIChatLLM:
    """Chat-completions adapter with a bounded timeout and no retries"""

    def __init__(
        self,
        model: str = "gpt-4o",
        temperature: float = 0.0,
        timeout: int = 60,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None,
        debug: bool = False,
    ):
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.debug = debug
        if client is None:
            if not api_key:
                raise RuntimeError(
                    "OpenAI API key not found. Set `OPENAI_API_KEY` in a .env file or in your environment."
                )
            # No SDK-level retries; one failed call is one ModelInvocationError
            client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.client = client

    def invoke(self, messages: List[Dict[str, str]]) -> LLMResponse:
        if self.debug:
            size = sum(len(m.get("content", "")) for m in messages)
            print(f"  → {self.model}: {len(messages)} message(s), {size} chars")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                timeout=self.timeout,
            )
        except OpenAIError as e:
            raise ModelInvocationError(f"LLM call failed ({type(e).__name__}): {e}") from e

        text = extract_primary_text(response)
        if self.debug:
            print(f"  ← {len(text) if text is not None else 0} chars")
        return LLMResponse(primary_text=text, raw=response)
