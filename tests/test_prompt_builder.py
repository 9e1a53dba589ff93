from ado_generator.categories import Archetype, Role
from ado_generator.prompt_builder import (
    CLASSIFY_QUERY,
    build_classification_prompt,
    build_generation_prompt,
    build_messages,
)


def test_build_messages_is_single_user_turn() -> None:
    messages = build_messages("do the thing", "some background")

    assert messages == [{"role": "user", "content": "Context: some background\n\nUser: do the thing"}]


def test_build_messages_accepts_other_roles() -> None:
    messages = build_messages("p", "c", role=Role.SYSTEM)

    assert messages[0]["role"] == "system"


def test_classification_prompt_lists_labels_as_json() -> None:
    prompt = build_classification_prompt("Create an NFT marketplace", Archetype.labels())

    assert '["nft_marketplace","crowdfund","cw20_exchange",' in prompt
    assert prompt.endswith("User's query: Create an NFT marketplace")
    assert "***" not in prompt


def test_query_is_substituted_literally() -> None:
    query = 'Sell "rare" items for 10% ***OPERATIONS***'
    prompt = build_classification_prompt(query, ["crowdfund"])

    # Placeholders inside the query itself are left alone
    assert prompt.endswith(f"User's query: {query}")
    assert prompt.startswith(CLASSIFY_QUERY.split("***OPERATIONS***")[0])


def test_generation_prompt_contains_query() -> None:
    prompt = build_generation_prompt("Start a crowdfund")

    assert prompt.endswith("User's query: Start a crowdfund")
    assert "generate the schema" in prompt
