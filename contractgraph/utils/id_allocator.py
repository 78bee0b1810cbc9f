"""Collision-free integer identifier allocation.

The allocator owns no table of identifiers. The host injects a membership
predicate and the allocator probes candidates against it: linearly from the
last identifier it handed out, escaping to a pseudorandom region after a long
run of collisions.
"""

import logging
from typing import Callable, Optional

from contractgraph.config.schema import GENERATOR_MODULUS, AllocatorConfig

logger = logging.getLogger("contractgraph.utils.id_allocator")


class AllocatorExhaustedError(RuntimeError):
    """Raised when no free identifier can be found."""

    pass


class IdAllocator:
    """Allocates positive integer identifiers.

    Not reentrant: both the linear cursor and the generator state are
    updated in place, so concurrent calls must be serialized by the caller.
    The ``is_allocated`` predicate must be pure for the duration of a call.
    """

    def __init__(
        self,
        is_allocated: Callable[[int], bool],
        count_allocated: Optional[Callable[[], int]] = None,
        config: Optional[AllocatorConfig] = None,
    ) -> None:
        """Initialize the allocator.

        Args:
            is_allocated: Returns True if the given identifier is in use.
            count_allocated: Optional count of identifiers in use, used to
                fail fast once the identifier space is full.
            config: Optional allocator settings. Defaults to AllocatorConfig().
        """
        self._is_allocated = is_allocated
        self._count_allocated = count_allocated
        self.config = config or AllocatorConfig.default()
        self._random_state = self.config.seed % GENERATOR_MODULUS
        self._last_allocated = 0
        self.rewind()

    @property
    def last_allocated(self) -> int:
        """The identifier returned by the most recent allocation (0 if none)."""
        return self._last_allocated

    def _random(self) -> int:
        self._random_state = (self._random_state * 3) % GENERATOR_MODULUS
        return self._random_state % (self.config.max_id + 1)

    def rewind(self) -> None:
        """Make the next allocation start probing from 1.

        The escape generator keeps its state, so repeated dense collision
        runs keep escaping to new regions instead of cycling.
        """
        self._last_allocated = 0

    def allocate(self) -> int:
        """Allocate and return a new identifier.

        Returns:
            int: An identifier for which ``is_allocated`` returned False.

        Raises:
            AllocatorExhaustedError: If every identifier up to ``max_id`` is
                in use, or no free identifier turned up within ``max_probes``
                candidates.
        """
        max_id = self.config.max_id
        if self._count_allocated is not None and self._count_allocated() >= max_id:
            raise AllocatorExhaustedError(
                f"All {max_id} identifiers are allocated"
            )

        candidate = self._last_allocated + 1
        streak = 0
        rejected = 0
        while True:
            if candidate == 0 or candidate > max_id:
                candidate = 1
            if not self._is_allocated(candidate):
                self._last_allocated = candidate
                return candidate

            rejected += 1
            if rejected >= self.config.max_probes:
                raise AllocatorExhaustedError(
                    f"No free identifier found after {rejected} probes"
                )

            candidate += 1
            streak += 1
            if streak >= self.config.streak_limit:
                candidate = self._random()
                streak = 0
                logger.debug(
                    "Collision streak of %d, escaping to candidate %d",
                    self.config.streak_limit,
                    candidate,
                )
