"""
Archetype Classification

The model is asked to map the user's request onto one of the supported
archetypes. Whatever label comes back is passed on as-is: an empty or
unknown label is a degraded classification, and the later stages turn it
into a generation without reference schemas.
"""

from typing import Optional, Sequence

from .categories import Archetype
from .prompt_builder import build_classification_prompt, build_messages

QUOTE_CHARS = "\"'"


def extract_label(text: Optional[str]) -> str:
    """Strip whitespace and surrounding quotes from the model answer"""
    if not text:
        return ""
    return text.strip().strip(QUOTE_CHARS)


class Classifier:
    """LLM-powered archetype classification"""

    def __init__(self, llm, labels: Optional[Sequence[str]] = None, debug: bool = False):
        self.llm = llm
        self.labels = list(labels) if labels is not None else Archetype.labels()
        self.debug = debug

    def classify(self, query: str, background_context: str = "") -> str:
        """
        Classify a query into an archetype label.

        Args:
            query: Natural language request
            background_context: Free text sent along with the prompt

        Returns:
            The label extracted from the model answer (may be unknown or empty)

        Raises:
            ModelInvocationError: If the model call fails
        """
        prompt = build_classification_prompt(query, self.labels)
        messages = build_messages(prompt, background_context)

        if self.debug:
            print("\n" + "=" * 80)
            print("ARCHETYPE CLASSIFICATION")
            print("=" * 80)
            print(f"Prompt length: {len(messages[0]['content'])} chars")

        response = self.llm.invoke(messages)
        label = extract_label(response.primary_text)

        if self.debug:
            known = "known" if label in self.labels else "UNKNOWN, continuing without components"
            print(f"Class: {label!r} ({known})")

        return label
