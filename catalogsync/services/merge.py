"""
Diff/merge for collection fields (tags, categories)
"""

from typing import Iterable, List, Union

from catalogsync.exceptions import ValidationError
from catalogsync.models.bulk_edit import MergeAction


def merge(current: Iterable[str], action: Union[MergeAction, str], delta: Iterable[str]) -> List[str]:
    """
    Compute the next value of a set-valued field

    add:    current followed by the delta items not already present
    remove: current without any delta item

    Duplicates collapse and existing order is kept, so applying the same
    operation twice gives the same result as applying it once.
    """
    try:
        action = MergeAction(action)
    except ValueError:
        raise ValidationError(f"Unknown action: {action}")

    current = list(dict.fromkeys(current))

    if action is MergeAction.ADD:
        return list(dict.fromkeys([*current, *delta]))

    removed = set(delta)
    return [item for item in current if item not in removed]
