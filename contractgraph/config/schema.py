"""Configuration schema definitions using Pydantic for validation.

Settings that tune identifier allocation live here so that invalid values
are rejected with a clear error when the configuration is built rather
than surfacing as an endless probe loop later on.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

# 3^30, the historical starting state of the escape generator.
DEFAULT_SEED = 205891132094649

# Largest identifier representable as a signed 64-bit integer.
DEFAULT_MAX_ID = 2**63 - 1

# The escape generator state is kept modulo this value.
GENERATOR_MODULUS = 2**63


class AllocatorConfig(BaseModel):
    """Configuration for IdAllocator.

    Attributes:
        seed: Initial state of the multiplicative escape generator.
        streak_limit: Consecutive collisions tolerated before jumping to a
            pseudorandom candidate.
        max_id: Largest identifier the allocator may hand out.
        max_probes: Rejected candidates tolerated in a single allocation
            before giving up.
    """

    seed: int = Field(default=DEFAULT_SEED, ge=1)
    streak_limit: int = Field(default=100, ge=1)
    max_id: int = Field(default=DEFAULT_MAX_ID, ge=1)
    max_probes: int = Field(default=10_000_000, ge=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_seed(self) -> "AllocatorConfig":
        """Reject seeds that would pin the generator at zero."""
        if self.seed % GENERATOR_MODULUS == 0:
            raise ValueError(
                f"seed {self.seed} is a multiple of the generator modulus"
            )
        return self

    @classmethod
    def default(cls) -> "AllocatorConfig":
        """Return an AllocatorConfig instance with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AllocatorConfig":
        """Create AllocatorConfig from a plain mapping.

        Raises:
            pydantic.ValidationError: If a value is out of range or unknown.
        """
        return cls.model_validate(data or {})
