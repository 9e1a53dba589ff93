import pytest

from ado_generator.categories import Archetype, ArtifactRecord, GenerationContext, GenerationIndex


def test_archetype_labels_are_fixed() -> None:
    assert Archetype.labels() == [
        "nft_marketplace",
        "crowdfund",
        "cw20_exchange",
        "auction_using_cw20_tokens",
        "extended_marketplace",
        "commission_based_sales",
        "vesting_and_staking",
    ]


def test_generation_context_payload() -> None:
    assert GenerationContext().to_payload() == {"ados_components": []}
    assert GenerationContext(["a"], "d").to_payload() == {
        "ados_components": ["a"],
        "application_description": "d",
    }


def test_empty_description_is_kept() -> None:
    context = GenerationContext(description="")

    assert not context.is_empty()
    assert context.serialize() == '{"ados_components":[],"application_description":""}'


def test_index_list_conversion() -> None:
    index = GenerationIndex()
    index.append(ArtifactRecord("1_a", "q1", "a"))
    index.append(ArtifactRecord("2_b", "q2", "b"))

    data = index.to_list()

    assert data == [
        {"id": "1_a", "query": "q1", "label": "a"},
        {"id": "2_b", "query": "q2", "label": "b"},
    ]
    assert GenerationIndex.from_list(data) == index
    assert [r.id for r in index] == ["1_a", "2_b"]


def test_record_without_id_is_rejected() -> None:
    with pytest.raises(ValueError, match="no id"):
        ArtifactRecord.from_dict({"query": "q", "label": "a"})
