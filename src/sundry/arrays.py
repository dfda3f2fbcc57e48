"""Array set operations and snapshot diffs.

Records are mappings (or objects with attributes) compared through an
optional *identity key*: two records are the same thing when their values at
that key are equal. Without a key, whole values are compared with ``==``.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()
_UNHASHABLE = object()


@dataclass(frozen=True, slots=True)
class UpdatedRecord:
    """A record retained across two snapshots whose fields changed."""

    from_: Any
    to: Any
    keys_updated: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ArrayDiff:
    """Outcome of :func:`get_detailed_array_diff`."""

    added: list[Any] = field(default_factory=list)
    removed: list[Any] = field(default_factory=list)
    updated: list[UpdatedRecord] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict using ``from``/``to``/``keysUpdated`` names."""
        return {
            "added": list(self.added),
            "removed": list(self.removed),
            "updated": [
                {"from": u.from_, "to": u.to, "keysUpdated": list(u.keys_updated)}
                for u in self.updated
            ],
        }


def get_field(record: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping or an attribute-bearing object."""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def locale_sort_key(text: str) -> tuple[str, str]:
    """Sort key approximating a locale collation for plain text.

    Letters order alphabetically regardless of case, and within the same
    letters lower case sorts before upper case (``"a" < "A" < "b"``).
    """
    return (text.casefold(), text.swapcase())


def _matches(x: Any, others: Sequence[Any], key: str | None) -> bool:
    if key is None:
        return x in others
    value = get_field(x, key)
    return any(get_field(other, key) == value for other in others)


def difference(a: Iterable[T], b: Iterable[Any], key: str | None = None) -> list[T]:
    """Return the elements of ``a`` with no identity match in ``b``.

    Args:
        a: Elements to filter.
        b: Elements to match against.
        key: Identity field name; ``None`` compares whole values.

    Returns:
        list: Elements of ``a`` in their original order.
    """
    others = list(b)
    return [x for x in a if not _matches(x, others, key)]


def intersection(a: Iterable[T], b: Iterable[Any], key: str | None = None) -> list[T]:
    """Return the elements of ``a`` that have an identity match in ``b``."""
    others = list(b)
    return [x for x in a if _matches(x, others, key)]


def _lookup_key(value: Any) -> Hashable:
    try:
        hash(value)
    except TypeError:
        return (_UNHASHABLE, canonical_text(value))
    return value


def unique_by(array: Iterable[T], key: str) -> list[T]:
    """Return one element per distinct value of ``key``.

    The last element seen for a given key value wins, but it takes the
    position where that key value first appeared. Records missing ``key``
    all share the key value ``None``. Unhashable values (lists, dicts) are
    compared by their :func:`canonical_text`.

    Example:
        >>> unique_by([{"k": 1, "v": "a"}, {"k": 2}, {"k": 1, "v": "b"}], "k")
        [{'k': 1, 'v': 'b'}, {'k': 2}]
    """
    lookup: dict[Hashable, T] = {}
    for item in array:
        lookup[_lookup_key(get_field(item, key))] = item
    return list(lookup.values())


def sort_by(
    array: Iterable[T],
    key: str,
    descending: bool = False,
    shallow_clone: bool = False,
) -> list[T]:
    """Return a sorted copy of ``array`` ordered by the text of field ``key``.

    Values are compared with :func:`locale_sort_key` applied to ``str(value)``.
    Records whose value is ``None`` (or missing) always come last, in their
    original order, whichever direction is requested. The sort is stable.

    Args:
        array: Records to sort.
        key: Field to sort on.
        descending: Reverse the order of the non-null values.
        shallow_clone: Copy only the list; by default each record is deep-copied
            so callers can mutate the result freely.

    Returns:
        list: The sorted copy.
    """
    items = list(array) if shallow_clone else copy.deepcopy(list(array))
    present = [item for item in items if get_field(item, key) is not None]
    absent = [item for item in items if get_field(item, key) is None]
    present.sort(
        key=lambda item: locale_sort_key(str(get_field(item, key))),
        reverse=descending,
    )
    return present + absent


def canonical_text(value: Any) -> str:
    """Stable text form of ``value`` used to pair records without a key."""
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, default=str)


def _record_fields(record: Any) -> Mapping[str, Any] | None:
    """Field view of a mapping, dataclass instance or plain object, else None."""
    if isinstance(record, Mapping):
        return record
    if isinstance(record, type):
        return None
    if is_dataclass(record):
        return {f.name: getattr(record, f.name) for f in fields(record)}
    if hasattr(record, "__dict__"):
        return vars(record)
    return None


def shallow_diff(old: Any, new: Any) -> list[str] | None:
    """Return the top-level fields that differ between ``old`` and ``new``.

    Fields present in only one of the two records count as changed.
    Mappings, dataclass instances and plain objects are compared field by
    field; other values are compared whole and yield ``[]`` when they differ.

    Returns:
        The changed field names, or ``None`` when nothing changed.
    """
    old_fields, new_fields = _record_fields(old), _record_fields(new)
    if old_fields is not None and new_fields is not None:
        names = list(old_fields) + [name for name in new_fields if name not in old_fields]
        changed = [
            name
            for name in names
            if old_fields.get(name, _MISSING) != new_fields.get(name, _MISSING)
        ]
        return changed or None
    return [] if old != new else None


def get_detailed_array_diff(
    old: Sequence[Any], new: Sequence[Any], key: str | None = None
) -> ArrayDiff:
    """Partition two snapshots of a collection into added/removed/updated.

    Records retained on both sides are sorted (by ``key`` or, without a key,
    by :func:`canonical_text`) and compared pairwise by position with
    :func:`shallow_diff`. Only one nesting level is inspected.

    Args:
        old: Earlier snapshot.
        new: Later snapshot.
        key: Identity field. Without it, identity is whole-value equality and
            pairing relies on the canonical text order.

    Returns:
        ArrayDiff: ``removed`` holds old records missing from ``new``,
        ``added`` holds new records missing from ``old``, and ``updated``
        holds retained pairs with at least one changed field.
    """
    removed = difference(old, new, key)
    added = difference(new, old, key)

    if key is not None:
        retained_old = sort_by(intersection(old, new, key), key, shallow_clone=True)
        retained_new = sort_by(intersection(new, old, key), key, shallow_clone=True)
    else:
        retained_old = sorted(intersection(old, new), key=canonical_text)
        retained_new = sorted(intersection(new, old), key=canonical_text)

    updated = []
    for before, after in zip(retained_old, retained_new):
        changed = shallow_diff(before, after)
        if changed is not None:
            updated.append(UpdatedRecord(from_=before, to=after, keys_updated=changed))

    logger.debug(
        "Array diff (key=%s): %d added, %d removed, %d updated",
        key,
        len(added),
        len(removed),
        len(updated),
    )
    return ArrayDiff(added=added, removed=removed, updated=updated)
