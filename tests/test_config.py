"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from contractgraph.config import DEFAULT_MAX_ID, DEFAULT_SEED, GENERATOR_MODULUS, AllocatorConfig
from contractgraph.graph import CustomGraph


def test_allocator_defaults() -> None:
    """Defaults match the historical allocator constants."""
    config = AllocatorConfig.default()

    assert config.seed == DEFAULT_SEED == 3**30
    assert config.streak_limit == 100
    assert config.max_id == DEFAULT_MAX_ID


def test_from_dict_overrides() -> None:
    """from_dict accepts a partial mapping."""
    config = AllocatorConfig.from_dict({"streak_limit": 5, "max_id": 1000})

    assert config.streak_limit == 5
    assert config.max_id == 1000
    assert config.seed == DEFAULT_SEED
    assert AllocatorConfig.from_dict({}) == AllocatorConfig()


@pytest.mark.parametrize(
    "data",
    [
        {"streak_limit": 0},
        {"max_id": 0},
        {"max_probes": -1},
        {"seed": GENERATOR_MODULUS},
        {"unknown": True},
    ],
)
def test_invalid_values_rejected(data) -> None:
    """Out-of-range and unknown settings fail validation."""
    with pytest.raises(ValidationError):
        AllocatorConfig.from_dict(data)


def test_graph_uses_allocator_config() -> None:
    """CustomGraph hands its allocator settings to both allocators."""
    graph = CustomGraph(AllocatorConfig(max_id=2))
    a, b = graph.add_node(), graph.add_node()

    assert (a.id, b.id) == (1, 2)
    with pytest.raises(RuntimeError):
        graph.add_node()
