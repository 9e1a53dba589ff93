# tests/conftest.py
import json
from pathlib import Path

import pytest

from ado_generator.catalog import CatalogStore
from ado_generator.llm_utils import LLMResponse
from ado_generator.result_store import ResultStore

CATALOG = {
    "nft_marketplace": {"classes": ["cw721", "marketplace"], "descr": "NFT sale contract"},
    "crowdfund": {"classes": ["cw721", "crowdfund", "splitter"]},
    "broken_app": {"classes": ["cw721", "missing_component"], "descr": "References a schema that does not exist"},
}

COMPONENTS = {
    "cw721": '{"name": "cw721"}',
    "marketplace": '{"name": "marketplace"}',
    "crowdfund": '{"name": "crowdfund"}',
    "splitter": '{"name": "splitter"}',
}


class StubLLM:
    """Records every message list and answers with `reply`.

    `reply` is a string, None, an exception instance, or a callable taking
    the messages and returning one of those.
    """

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        answer = self.reply(messages) if callable(self.reply) else self.reply
        if isinstance(answer, Exception):
            raise answer
        raw = {"choices": [{"message": {"role": "assistant", "content": answer}}]}
        return LLMResponse(primary_text=answer, raw=raw)


def is_classification(messages) -> bool:
    return "classify the query" in messages[0]["content"]


@pytest.fixture
def make_llm():
    return StubLLM


@pytest.fixture
def route_reply():
    """Build a reply that answers classification and generation calls differently"""

    def build(label, artifact):
        def reply(messages):
            return label if is_classification(messages) else artifact

        return reply

    return build


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    root = tmp_path / "config"
    objects = root / "objects"
    objects.mkdir(parents=True)
    (root / "config_all.json").write_text(json.dumps(CATALOG), encoding="utf-8")
    for name, schema in COMPONENTS.items():
        (objects / f"{name}.json").write_text(schema, encoding="utf-8")
    return root


@pytest.fixture
def catalog(catalog_dir: Path) -> CatalogStore:
    return CatalogStore(catalog_dir / "config_all.json", catalog_dir / "objects")


@pytest.fixture
def store(tmp_path: Path) -> ResultStore:
    return ResultStore(tmp_path / "generated", tmp_path / "generated_map.json")
