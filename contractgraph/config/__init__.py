"""Configuration schema and validation for contractgraph."""

from .schema import DEFAULT_MAX_ID, DEFAULT_SEED, GENERATOR_MODULUS, AllocatorConfig

__all__ = [
    "AllocatorConfig",
    "DEFAULT_MAX_ID",
    "DEFAULT_SEED",
    "GENERATOR_MODULUS",
]
