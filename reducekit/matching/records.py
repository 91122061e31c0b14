"""
Record matcher: select whole records by the value of their name field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

from reducekit.config import get_settings
from reducekit.domain.models import Record
from reducekit.matching.abstract import AbstractMatchStrategy

R = TypeVar("R")

_ABSENT = object()


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field, _ABSENT)
    return getattr(record, field, _ABSENT)


def match_records(records: Iterable[R], name: str, field: str = "name") -> List[R]:
    """
    Return the records whose `field` equals `name`, in input order.

    Records may be mappings or objects exposing `field` as an attribute.
    Records lacking the field never match. The records themselves are
    returned, not copies and not just their names.
    """
    return [record for record in records if _field_value(record, field) == name]


class RecordMatcher(AbstractMatchStrategy):
    name: str = "record"
    description: str = "Whole records whose name field equals the target, in order."

    def __init__(self, field: Optional[str] = None) -> None:
        self.field = field or get_settings().record_name_field

    def match(self, items: Sequence[Record], target: str) -> List[Record]:
        return match_records(items, target, field=self.field)


__all__ = ["match_records", "RecordMatcher"]
