# File: /second_brain_api/crud/record_query.py | Version: 1.0 | Title: In-memory filter / sort / search over generic records
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from second_brain_api.core.exceptions import InvariantViolationError
from second_brain_api.schemas.document_view import ViewFilter, ViewSort

RecordDict = Dict[str, Any]


class FilterOperator(str, Enum):
    equals = "equals"
    not_equals = "not_equals"
    contains = "contains"
    not_contains = "not_contains"
    does_not_contain = "does_not_contain"
    starts_with = "starts_with"
    ends_with = "ends_with"
    greater_than = "greater_than"
    greater_than_or_equal = "greater_than_or_equal"
    less_than = "less_than"
    less_than_or_equal = "less_than_or_equal"
    before = "before"
    after = "after"
    on_or_before = "on_or_before"
    on_or_after = "on_or_after"
    in_ = "in"
    not_in = "not_in"
    contains_all = "contains_all"
    is_empty = "is_empty"
    is_not_empty = "is_not_empty"


_OPERATORS = {op.value: op for op in FilterOperator}


def parse_operator(raw: str) -> FilterOperator:
    op = _OPERATORS.get(raw)
    if op is None:
        raise InvariantViolationError(f"Unsupported filter operator '{raw}'")
    return op


# ---------------------------
# Value helpers
# ---------------------------


def _normalize(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _ordered(a: Any, b: Any) -> Optional[int]:
    """-1/0/1 when a and b are comparable (numbers with numbers, else as strings); None otherwise."""
    if a is None or b is None:
        return None
    a, b = _normalize(a), _normalize(b)
    numeric = (int, float)
    if isinstance(a, numeric) and isinstance(b, numeric) and not isinstance(a, bool) and not isinstance(b, bool):
        return (a > b) - (a < b)
    if isinstance(a, numeric) != isinstance(b, numeric):
        try:
            fa, fb = float(a), float(b)
        except (TypeError, ValueError):
            return None
        return (fa > fb) - (fa < fb)
    sa, sb = str(a), str(b)
    return (sa > sb) - (sa < sb)


def _text_match(actual: Any, needle: Any, how: str) -> bool:
    n = str(needle).lower()
    for item in _as_list(actual):
        if item is None:
            continue
        s = str(item).lower()
        if how == "contains" and n in s:
            return True
        if how == "starts" and s.startswith(n):
            return True
        if how == "ends" and s.endswith(n):
            return True
    return False


def _equals(actual: Any, expected: Any) -> bool:
    actual, expected = _normalize(actual), _normalize(expected)
    # Array-valued properties (multiSelect) match when they contain the value
    if isinstance(actual, list) and not isinstance(expected, list):
        return expected in actual
    return actual == expected


# ---------------------------
# Filtering
# ---------------------------


def matches(record: RecordDict, flt: ViewFilter) -> bool:
    op = parse_operator(flt.operator)
    actual = record.get(flt.property_id)
    val = flt.value

    if op == FilterOperator.equals:
        return _equals(actual, val)
    if op == FilterOperator.not_equals:
        return not _equals(actual, val)
    if op == FilterOperator.contains:
        return _text_match(actual, val, "contains")
    if op in (FilterOperator.not_contains, FilterOperator.does_not_contain):
        return not _text_match(actual, val, "contains")
    if op == FilterOperator.starts_with:
        return _text_match(actual, val, "starts")
    if op == FilterOperator.ends_with:
        return _text_match(actual, val, "ends")
    if op == FilterOperator.in_:
        wanted = [_normalize(v) for v in _as_list(val)]
        return any(_normalize(a) in wanted for a in _as_list(actual))
    if op == FilterOperator.not_in:
        wanted = [_normalize(v) for v in _as_list(val)]
        return not any(_normalize(a) in wanted for a in _as_list(actual))
    if op == FilterOperator.contains_all:
        have = [_normalize(a) for a in _as_list(actual)]
        return all(_normalize(v) in have for v in _as_list(val))
    if op == FilterOperator.is_empty:
        return _is_empty(actual)
    if op == FilterOperator.is_not_empty:
        return not _is_empty(actual)

    cmp = _ordered(actual, val)
    if cmp is None:
        return False
    if op in (FilterOperator.greater_than, FilterOperator.after):
        return cmp > 0
    if op in (FilterOperator.greater_than_or_equal, FilterOperator.on_or_after):
        return cmp >= 0
    if op in (FilterOperator.less_than, FilterOperator.before):
        return cmp < 0
    if op in (FilterOperator.less_than_or_equal, FilterOperator.on_or_before):
        return cmp <= 0
    return False  # pragma: no cover


def apply_filters(records: Iterable[RecordDict], filters: Sequence[ViewFilter]) -> List[RecordDict]:
    active = [f for f in filters if f.enabled]
    # Fail on a bad operator even when there is nothing to filter
    for f in active:
        parse_operator(f.operator)
    return [r for r in records if all(matches(r, f) for f in active)]


# ---------------------------
# Search + sort
# ---------------------------


def apply_search(records: Iterable[RecordDict], search: Optional[str]) -> List[RecordDict]:
    records = list(records)
    term = (search or "").strip().lower()
    if not term:
        return records

    def hit(rec: RecordDict) -> bool:
        for value in rec.values():
            for item in _as_list(value):
                if isinstance(item, str) and term in item.lower():
                    return True
        return False

    return [r for r in records if hit(r)]


def apply_sorts(records: Iterable[RecordDict], sorts: Sequence[ViewSort]) -> List[RecordDict]:
    """Stable multi-key sort by ascending `order`; records missing the value always sort last."""
    out = list(records)
    active = sorted((s for s in sorts if s.enabled), key=lambda s: s.order)
    # Python's sort is stable: apply the least significant key first
    for s in reversed(active):
        present = [r for r in out if r.get(s.property_id) is not None]
        missing = [r for r in out if r.get(s.property_id) is None]
        present.sort(key=lambda r: _SortKey(r.get(s.property_id)), reverse=s.direction == "desc")
        out = present + missing
    return out


class _SortKey:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: "_SortKey") -> bool:
        cmp = _ordered(self.value, other.value)
        return cmp is not None and cmp < 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _SortKey) and _ordered(self.value, other.value) == 0
