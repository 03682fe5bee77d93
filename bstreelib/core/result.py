"""Result codes for mutating tree operations."""

from enum import Enum


class TreeResult(Enum):
    """Outcome of insert and delete.

    Only OK is truthy, so ``if tree.delete(key):`` reads as "was a node
    removed". NOT_FOUND and INVALID_ARGUMENT are both falsy but stay
    distinguishable for callers that care why nothing happened.
    """
    OK = "ok"
    NOT_FOUND = "not_found"               # Delete of an absent key, a no-op
    INVALID_ARGUMENT = "invalid_argument"  # None key, wrong type, or failing callback

    def __bool__(self) -> bool:
        return self is TreeResult.OK
