"""Solver configuration."""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any


@dataclass(frozen=True)
class FlowOptions:
    """Immutable configuration for a single solve call.

    Attributes:
        max_flow: Upper bound on the total flow pushed. ``None`` means
            unbounded.
        allow_negative_costs: When False, a solve fails fast if any original
            edge with spare capacity has a negative cost.
        check_negative_cycles: Run a Bellman-Ford cycle check over the
            original edges before solving.
        use_bellman_ford_init_potentials: Seed the vertex potentials with
            Bellman-Ford distances from the source instead of zeros.
        verify_conservation: Check per-node flow balance after solving.
    """

    max_flow: int | None = None
    allow_negative_costs: bool = True
    check_negative_cycles: bool = False
    use_bellman_ford_init_potentials: bool = False
    verify_conservation: bool = False

    @classmethod
    def defaults(cls) -> "FlowOptions":
        return cls()

    def replace(self, **changes: Any) -> "FlowOptions":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["FlowOptions"]
