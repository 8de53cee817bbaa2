"""Ordering of the sort keys stored under one policy partition."""

from typing import List, Sequence

STATE_MARKER = "STATE"


def order_policy_sort_keys(sort_keys: Sequence[str]) -> List[str]:
    """Put STATE entries on top, then everything else.

    Each group is sorted lexically on its own. Sort keys are timestamp or
    sequence prefixed, so lexical order follows write order.

    Examples:
        >>> order_policy_sort_keys(["STATE#2", "STATE#1", "v1", "v3", "v2"])
        ['STATE#1', 'STATE#2', 'v1', 'v2', 'v3']
    """
    if len(sort_keys) < 2:
        return list(sort_keys)

    state_keys = sorted(sk for sk in sort_keys if STATE_MARKER in sk)
    non_state_keys = sorted(sk for sk in sort_keys if STATE_MARKER not in sk)

    return state_keys + non_state_keys
