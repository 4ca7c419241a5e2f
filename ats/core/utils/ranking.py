"""
Rank bookkeeping for dense, zero based ranked collections.

A collection is given as a mapping of ``{key: rank}`` whose ranks are
``0..n-1``. Each planner returns the rank the target row ends up at together
with the ``(key, new_rank)`` updates the *other* rows need so the collection
stays dense afterwards. Nothing here touches the database;
:mod:`ats.recruitment.utils.pipeline` applies the plans under a row lock.
"""
from collections import namedtuple


class Shift(namedtuple('Shift', ['start', 'end', 'delta'])):
    """Move every rank in ``[start, end]`` by ``delta``, `end=None` is unbounded"""

    __slots__ = ()

    def covers(self, rank):
        return rank >= self.start and (self.end is None or rank <= self.end)


def clamp(position, highest):
    return max(0, min(position, highest))


def insert_shift(position):
    # open a gap at position
    return Shift(position, None, 1)


def move_shift(current, target):
    if target is None or target == current:
        return None
    if target > current:
        # moving down, rows in (current, target] close the gap left behind
        return Shift(current + 1, target, -1)
    # moving up, rows in [target, current) make room
    return Shift(target, current - 1, 1)


def remove_shift(current):
    return Shift(current + 1, None, -1)


def shift_updates(ranks, shift, exclude=None):
    """`(key, new_rank)` for every row of `ranks` other than `exclude` covered by `shift`"""
    if shift is None:
        return []
    return sorted(
        (key, rank + shift.delta)
        for key, rank in ranks.items()
        if key != exclude and shift.covers(rank)
    )


def plan_insert(ranks, position=0):
    """
    :param ranks: current ``{key: rank}`` of the collection
    :param position: requested rank of the new row, clamped to ``[0, n]``
    :return: ``(position, updates)``
    """
    position = clamp(position or 0, len(ranks))
    return position, shift_updates(ranks, insert_shift(position))


def plan_move(ranks, key, position=None):
    """
    :param ranks: current ``{key: rank}``, must contain `key`
    :param position: requested rank, clamped to ``[0, n-1]``; None keeps the row in place
    :return: ``(position, updates)``
    """
    current = ranks[key]
    if position is None:
        return current, []
    position = clamp(position, len(ranks) - 1)
    return position, shift_updates(ranks, move_shift(current, position), exclude=key)


def plan_remove(ranks, key):
    """Updates closing the gap left by removing `key`"""
    return shift_updates(ranks, remove_shift(ranks[key]), exclude=key)
