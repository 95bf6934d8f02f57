"""Space allocation along one axis.

The allocator hands out space in a fixed sequence of passes. After the
first, each pass grows children one cell at a time, round-robin:

1. Minimum:    every child up to its minimum size hint, in layout order,
               so that earlier children are satisfied first. MINIMUM-policy
               children stop here; their minimum is their target.
2. Preferred:  PREFERRED and MAXIMUM children up to their size hint.
3. Expanding:  EXPANDING children, without bound.
4. Leftover:   MINIMUM and PREFERRED children, smallest first
               (water-filling), keeping their sizes as equal as possible.

Allocation stops the moment the space runs out, whatever pass it is in.
Running out during the minimum pass is not an error: later children are
left below their minimum ("starved") and the result says so.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence

from boxtui.core.geometry import Alignment
from boxtui.core.policy import SizePolicy
from boxtui.widgets.base import Widget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SizeRequest:
    """What one child asks for along the allocation axis."""
    minimum: int
    preferred: int
    policy: SizePolicy = SizePolicy.PREFERRED


@dataclass
class Allocation:
    """Result of allocating space among children."""
    sizes: list[int]
    space: int
    remaining: int
    starved: list[int] = field(default_factory=list)  # Indices below their minimum

    @property
    def degraded(self) -> bool:
        """True when some child got less than its minimum size hint."""
        return bool(self.starved)

    @property
    def used(self) -> int:
        return self.space - self.remaining

    def __iter__(self) -> Iterator[int]:
        return iter(self.sizes)

    def __len__(self) -> int:
        return len(self.sizes)

    def __getitem__(self, index: int) -> int:
        return self.sizes[index]


def _fill_minimums(sizes: list[int], remaining: int, requests: Sequence[SizeRequest]) -> int:
    """Give each child its minimum in layout order; later children starve first."""
    for i, request in enumerate(requests):
        grant = min(max(request.minimum - sizes[i], 0), remaining)
        sizes[i] += grant
        remaining -= grant
        if remaining == 0:
            break
    return remaining


def _round_robin(sizes: list[int], remaining: int, can_grow: Callable[[int, int], bool]) -> int:
    """
    Grow every child accepted by can_grow(index, size) by one per round.

    Returns the space left once no child can grow or space runs out.
    """
    while remaining > 0:
        changed = False
        for i in range(len(sizes)):
            if remaining == 0:
                break
            if can_grow(i, sizes[i]):
                sizes[i] += 1
                remaining -= 1
                changed = True
        if not changed:
            break
    return remaining


def _water_fill(sizes: list[int], remaining: int, eligible: list[int]) -> int:
    """Grow the smallest eligible children first until space runs out."""
    while remaining > 0 and eligible:
        low = min(sizes[i] for i in eligible)
        for i in eligible:
            if remaining == 0:
                break
            if sizes[i] == low:
                sizes[i] += 1
                remaining -= 1
    return remaining


def allocate(requests: Sequence[SizeRequest], space: int) -> Allocation:
    """
    Divide space among children according to their requests.

    Args:
        requests: One SizeRequest per child, in layout order
        space: Cells available along the axis

    Returns:
        Allocation whose sizes never sum to more than space
    """
    if space < 0:
        raise ValueError(f"Space to allocate must be non-negative, got {space}")

    sizes = [0] * len(requests)
    if not requests:
        return Allocation(sizes=sizes, space=space, remaining=space)

    remaining = _fill_minimums(sizes, space, requests)
    remaining = _round_robin(
        sizes, remaining,
        lambda i, s: requests[i].policy.grows_to_preferred and s < requests[i].preferred,
    )
    remaining = _round_robin(sizes, remaining, lambda i, s: requests[i].policy is SizePolicy.EXPANDING)
    remaining = _water_fill(
        sizes, remaining,
        [i for i, r in enumerate(requests) if r.policy.shares_leftover],
    )

    starved = [i for i, r in enumerate(requests) if sizes[i] < r.minimum]
    if starved:
        logger.debug(
            "Space %d below total minimum %d; starved children: %s",
            space, sum(r.minimum for r in requests), starved,
        )

    return Allocation(sizes=sizes, space=space, remaining=remaining, starved=starved)


def request_for(widget: Widget, alignment: Alignment) -> SizeRequest:
    """Build the SizeRequest a widget makes along an axis."""
    horizontal, vertical = widget.size_policy()
    return SizeRequest(
        minimum=alignment.main(widget.min_size_hint()),
        preferred=alignment.main(widget.size_hint()),
        policy=horizontal if alignment is Alignment.HORIZONTAL else vertical,
    )


def allocate_widgets(widgets: Sequence[Widget], space: int, alignment: Alignment) -> Allocation:
    """Allocate space among widgets along the given axis."""
    return allocate([request_for(w, alignment) for w in widgets], space)
