"""Core enums and data structures for ADO schema generation.

This module is dependency-light so every other part of the pipeline can
import it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class Archetype(Enum):
    """Supported Andromeda application archetypes.

    The values are the labels the classifier is asked to choose from and
    the top-level keys of the catalog.
    """

    NFT_MARKETPLACE = "nft_marketplace"
    CROWDFUND = "crowdfund"
    CW20_EXCHANGE = "cw20_exchange"
    AUCTION_USING_CW20_TOKENS = "auction_using_cw20_tokens"
    EXTENDED_MARKETPLACE = "extended_marketplace"
    COMMISSION_BASED_SALES = "commission_based_sales"
    VESTING_AND_STAKING = "vesting_and_staking"

    @classmethod
    def labels(cls) -> List[str]:
        return [a.value for a in cls]


class Role(Enum):
    """Roles allowed in a message turn"""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class GenerationContext:
    """Reference material handed to the generation prompt.

    `components` keeps the catalog-declared order; that order is the order
    the schemas appear in the prompt.
    """

    components: List[str] = field(default_factory=list)
    description: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.components and self.description is None

    def to_payload(self) -> Dict:
        payload: Dict = {"ados_components": list(self.components)}
        if self.description is not None:
            payload["application_description"] = self.description
        return payload

    def serialize(self) -> str:
        """Compact JSON used as the background of the generation prompt."""
        return json.dumps(self.to_payload(), separators=(",", ":"), ensure_ascii=False)


@dataclass
class ArtifactRecord:
    """One index entry per successful generation"""

    id: str
    query: str
    label: str

    def to_dict(self) -> Dict:
        return {"id": self.id, "query": self.query, "label": self.label}

    @classmethod
    def from_dict(cls, data: Dict) -> "ArtifactRecord":
        if not isinstance(data, dict):
            raise ValueError(f"Index record must be a JSON object: {data!r}")
        # Indexes written by the first version of the tool used "name"
        record_id = data.get("id", data.get("name"))
        if record_id is None:
            raise ValueError(f"Index record has no id: {data}")
        return cls(id=str(record_id), query=data.get("query", ""), label=data.get("label", ""))


@dataclass
class GenerationIndex:
    """Ordered record of everything generated so far.

    Loaded once, threaded through the pipeline by the caller and only
    mutated by the ResultStore.
    """

    records: List[ArtifactRecord] = field(default_factory=list)

    def append(self, record: ArtifactRecord) -> None:
        self.records.append(record)

    def ids(self) -> List[str]:
        return [r.id for r in self.records]

    def to_list(self) -> List[Dict]:
        return [r.to_dict() for r in self.records]

    @classmethod
    def from_list(cls, data: List[Dict]) -> "GenerationIndex":
        return cls(records=[ArtifactRecord.from_dict(item) for item in data])

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ArtifactRecord]:
        return iter(self.records)
