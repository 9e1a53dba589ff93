"""
Batch Plan
==========

Picks demonstration queries out of the query source, a JSON mapping of
archetype label -> list of example requests.
"""

from typing import Dict, List, Sequence, Tuple

from .categories import Archetype
from .utils import read_json

# (archetype, position) picks, in run order
DEFAULT_BATCH_PLAN: List[Tuple[str, int]] = [(a.value, 0) for a in Archetype] + [
    (Archetype.EXTENDED_MARKETPLACE.value, 1),
    (Archetype.CW20_EXCHANGE.value, 1),
    (Archetype.VESTING_AND_STAKING.value, 1),
]


def load_queries(path) -> Dict[str, List[str]]:
    queries = read_json(path)
    if not isinstance(queries, dict):
        raise ValueError(f"Query source {path} must be a JSON object")
    return queries


def select_queries(queries: Dict[str, List[str]], plan: Sequence[Tuple[str, int]]) -> List[str]:
    """Resolve every plan entry to its query string"""
    selected = []
    for label, position in plan:
        candidates = queries.get(label) or []
        if position >= len(candidates) or not isinstance(candidates[position], str):
            raise KeyError(f"No query #{position} for archetype '{label}'")
        selected.append(candidates[position])
    return selected


def all_queries(queries: Dict[str, List[str]]) -> List[str]:
    return [q for candidates in queries.values() for q in candidates if isinstance(q, str)]
