from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any


def _sort_key(row: Any, sort_type: str) -> Decimal:
    value = row[sort_type] if isinstance(row, Mapping) else getattr(row, sort_type)
    return Decimal(str(value))


def sort_data(
    input_data: Sequence[Any],
    sort_type: str | None = None,
    order: str | None = None,
) -> list[Any]:
    """Return a copy of ``input_data`` numerically sorted on ``sort_type``.

    Unless ``order`` is ``"asc"`` or ``"desc"`` and a key is given, the copy keeps
    the input order.
    """
    rows = list(input_data)
    if order not in ("asc", "desc") or not sort_type:
        return rows
    return sorted(rows, key=lambda row: _sort_key(row, sort_type), reverse=order == "desc")
