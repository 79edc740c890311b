"""Strategies that sort stack ``a`` using the two stacks and their moves."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Item, Stacks


def assign_ranks(stacks: Stacks) -> None:
    """Give every item its 1-based position in ascending order of values."""
    items = [*stacks.a, *stacks.b]
    ranks = {value: position for position, value in enumerate(
        sorted(item.value for item in items), start=1)}
    for item in items:
        item.rank = ranks[item.value]


def chunk_count(size: int) -> int:
    """Number of rank chunks used to sort ``size`` items."""
    if 5 < size < 21:
        return 2
    if size == 100:
        return 5
    if size == 500:
        return 12
    return size * 7 // 400 + 3


def chunk_min(size: int, count: int, chunk_id: int) -> int:
    """Lowest rank in chunk ``chunk_id`` (1-based) of ``count`` chunks."""
    if chunk_id == 1:
        return 1
    return (chunk_id - 1) * (size // count) + 1


def chunk_max(size: int, count: int, chunk_id: int) -> int:
    """Highest rank in chunk ``chunk_id`` (1-based) of ``count`` chunks."""
    if chunk_id == count:
        return size
    return chunk_id * (size // count)


def search_range_from_top(stack: Sequence[Item], low: int, high: int) -> int | None:
    """Rotations bringing the first item ranked in ``[low, high]`` to the top.

    Returns ``None`` if there is no such item or the range has ``low >= high``.
    """
    if low >= high:
        return None
    return next((i for i, item in enumerate(stack) if low <= item.rank <= high), None)


def search_range_from_bottom(stack: Sequence[Item], low: int, high: int) -> int | None:
    """Reverse rotations bringing the lowest item ranked in ``[low, high]`` to the top.

    Returns ``None`` if there is no such item or the range has ``low >= high``.
    """
    if low >= high:
        return None
    return next(
        (i for i, item in enumerate(reversed(stack), start=1) if low <= item.rank <= high),
        None,
    )


def search_rank_from_top(stack: Sequence[Item], rank: int) -> int | None:
    """Rotations bringing the item of ``rank`` to the top, or ``None``."""
    if rank <= 0:
        return None
    return next((i for i, item in enumerate(stack) if item.rank == rank), None)


def search_rank_from_bottom(stack: Sequence[Item], rank: int) -> int | None:
    """Reverse rotations bringing the item of ``rank`` to the top, or ``None``."""
    if rank <= 0:
        return None
    return next(
        (i for i, item in enumerate(reversed(stack), start=1) if item.rank == rank),
        None,
    )


def sort_two(stacks: Stacks) -> None:
    """Order the two top items of ``a``."""
    if len(stacks.a) >= 2 and stacks.a[1].value < stacks.a[0].value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order a stack ``a`` of three items with at most two moves."""
    if len(stacks.a) < 3:
        return
    top, mid, bottom = (item.value for item in list(stacks.a)[:3])
    if top > mid and mid < bottom:
        if bottom > top:
            stacks.sa()
        else:
            stacks.ra()
    elif top < mid and mid > bottom:
        if bottom < top:
            stacks.rra()
        else:
            stacks.sa()
            stacks.ra()
    elif top > mid > bottom:
        stacks.sa()
        stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Order a stack ``a`` of four ranked items, using ``b`` for one of them."""
    if stacks.is_sorted():
        return
    stacks.pb()
    sort_three(stacks)
    pushed = stacks.b[0].rank
    a = stacks.a
    if pushed < a[0].rank:
        stacks.pa()
    elif a[0].rank < pushed < a[1].rank:
        stacks.ra()
        stacks.pa()
        stacks.rra()
    elif a[-2].rank < pushed < a[-1].rank:
        stacks.rra()
        stacks.pa()
        stacks.ra()
        stacks.ra()
    else:
        stacks.pa()
        stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Order a stack ``a`` of five ranked items."""
    if stacks.is_sorted():
        return
    position = next(i for i, item in enumerate(stacks.a) if item.rank == 5)
    if position <= 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(5 - position):
            stacks.rra()
    stacks.pb()
    sort_four(stacks)
    stacks.pa()
    stacks.ra()


def _push_chunk(stacks: Stacks, low: int, high: int) -> None:
    for _ in range(high - low + 1):
        forward = search_range_from_top(stacks.a, low, high)
        backward = search_range_from_bottom(stacks.a, low, high)
        if forward is None or backward is None:
            continue
        if forward <= backward:
            for _ in range(forward):
                stacks.ra()
        else:
            for _ in range(backward):
                stacks.rra()
        stacks.pb()


def _pull_back(stacks: Stacks, size: int) -> None:
    for rank in range(size, 0, -1):
        backward = search_rank_from_bottom(stacks.b, rank)
        forward = search_rank_from_top(stacks.b, rank)
        if forward is None or backward is None:
            continue
        if forward <= backward:
            for _ in range(forward):
                stacks.rb()
        else:
            for _ in range(backward):
                stacks.rrb()
        stacks.pa()


def chunk_sort(stacks: Stacks, size: int) -> None:
    """Sort ranked items by pushing them to ``b`` chunk by chunk, then back."""
    count = chunk_count(size)
    for chunk_id in range(1, count + 1):
        _push_chunk(
            stacks,
            chunk_min(size, count, chunk_id),
            chunk_max(size, count, chunk_id),
        )
    _pull_back(stacks, size)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values``, first value on top of ``a``."""
    stacks = Stacks(values)
    assign_ranks(stacks)
    if stacks.is_sorted():
        return []
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks, size)
    return stacks.moves