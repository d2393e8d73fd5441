"""Narrow a configuration's actions to a requested set of ids."""

from collections import Counter
from typing import Iterable, List, Optional, Sequence

from concatenate.domain.errors import DuplicateIdentifierError, UnknownIdentifierError
from concatenate.domain.models import Action
from concatenate.ports.outbound import LoggerPort


def find_duplicate_ids(actions: Sequence[Action]) -> List[str]:
    """Ids defined by more than one action, in first-seen order."""
    counts = Counter(a.identifier for a in actions if a.is_selectable)
    return [identifier for identifier, count in counts.items() if count > 1]


def select_actions(
    actions: Sequence[Action],
    requested: Iterable[str],
    logger: Optional[LoggerPort] = None,
) -> List[Action]:
    """Return the actions whose id was requested, in configuration order.

    Checks run in a fixed order and the first failing one aborts:
    duplicated ids, then unknown requested ids. Actions without an id
    can never be selected, so they are reported as a warning.
    """
    wanted = list(dict.fromkeys(requested))
    if not wanted:
        return []

    duplicates = find_duplicate_ids(actions)
    if duplicates:
        raise DuplicateIdentifierError(duplicates)

    available = [a.identifier for a in actions if a.is_selectable]
    missing = [identifier for identifier in wanted if identifier not in available]
    if missing:
        raise UnknownIdentifierError(missing, available)

    unselectable = [a.label for a in actions if not a.is_selectable]
    if unselectable and logger is not None:
        logger.warn(
            "Some actions do not have IDs defined and will be excluded when filtering by ID. "
            f"Actions without IDs: {', '.join(unselectable)}"
        )
        logger.skip_line()

    wanted_set = set(wanted)
    return [a for a in actions if a.is_selectable and a.identifier in wanted_set]
