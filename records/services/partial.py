"""
Sparse update handling.

A field is written iff its key is present in the payload and declared
on the resource's payload serializer.  Validation uses the create rules
with ``partial=True``, so empty strings and ``false`` are legitimate
values rather than "not provided".  Association lists are split out and
applied as replace-style sets by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ..exceptions import InvalidInput


@dataclass
class PartialUpdate:
    fields: dict[str, Any] = field(default_factory=dict)
    associations: dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.fields and not self.associations


def validate_payload(serializer_class, data, *, partial: bool = False, context=None) -> dict[str, Any]:
    s = serializer_class(data=data, partial=partial, context=context or {})
    if not s.is_valid():
        raise InvalidInput('Invalid input provided', data=s.errors)
    return dict(s.validated_data)


def split_associations(values: dict[str, Any], association_keys: Iterable[str]) -> PartialUpdate:
    keys = set(association_keys)
    return PartialUpdate(
        fields={k: v for k, v in values.items() if k not in keys},
        associations={k: v for k, v in values.items() if k in keys},
    )


def build_update(serializer_class, data, *, association_keys: Iterable[str] = (), context=None) -> PartialUpdate:
    """Validate ``data`` as a sparse update and split it for writing.

    Raises :class:`InvalidInput` when nothing writable is present.
    """
    values = validate_payload(serializer_class, data, partial=True, context=context)
    update = split_associations(values, association_keys)
    if update.is_empty():
        raise InvalidInput('empty update: no updatable fields provided')
    return update
