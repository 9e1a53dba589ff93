"""Prompt construction for ADO schema generation.

Two templates drive the pipeline:
- CLASSIFY_QUERY picks one archetype for the user's request
- GENERATE_FLEX asks for the final application schema, given the
  component schemas of that archetype as background

Both are sent as a single user turn that carries the background context
and the filled-in template.
"""

from __future__ import annotations

import json
from typing import Dict, List, Sequence

from .categories import Role


OPERATIONS_PLACEHOLDER = "***OPERATIONS***"
QUERY_PLACEHOLDER = "***QUERY***"

CLASSIFY_QUERY = (
    "Lets pretend that we have an LLM app that generates Andromeda Protocol app contracts "
    "using user promtps in natural language. You will be given a user's promt. Based on the context, "
    "classify the query to one of the following classes. Classes: ***OPERATIONS***. "
    "User's query: ***QUERY***"
)

GENERATE_FLEX = (
    "You will be given a description of the modules and the schema of the modules. Based on this "
    "context and the user's query, generate the schema that fulfills the users intent. "
    "User's query: ***QUERY***"
)


def build_messages(prompt: str, context: str, role: Role = Role.USER) -> List[Dict[str, str]]:
    """Wrap background context and prompt into one message turn."""
    return [{"role": role.value, "content": f"Context: {context}\n\nUser: {prompt}"}]


def build_classification_prompt(query: str, labels: Sequence[str]) -> str:
    return (
        CLASSIFY_QUERY
        .replace(OPERATIONS_PLACEHOLDER, json.dumps(list(labels), separators=(",", ":")))
        .replace(QUERY_PLACEHOLDER, query)
    )


def build_generation_prompt(query: str) -> str:
    return GENERATE_FLEX.replace(QUERY_PLACEHOLDER, query)
