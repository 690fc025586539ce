"""Stat Block — the six base stats and their derived total."""

from collections.abc import Mapping

STAT_NAMES = (
    "hp", "attack", "defense", "specialAttack", "specialDefense", "speed",
)

# Per-stat ceiling so the summed total still fits an INTEGER cast
MAX_STAT = (2**31 - 1) // len(STAT_NAMES)


def compute_total(stats: Mapping[str, int]) -> int:
    """Sum of the six named stats; missing stats count as 0, `total` is ignored."""
    return sum(int(stats.get(name, 0)) for name in STAT_NAMES)


def with_total(stats: Mapping[str, int]) -> dict:
    """Copy of the six named stats with `total` recomputed."""
    block = {name: int(stats.get(name, 0)) for name in STAT_NAMES}
    block["total"] = compute_total(block)
    return block
