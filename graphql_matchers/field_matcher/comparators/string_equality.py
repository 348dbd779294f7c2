# comparators/string_equality.py
"""
Comparador por defecto: igualdad de representaciones textuales.
"""

from typing import Any

from .base_comparator import BaseComparator
from ..accessors import FieldAccessor
from ..models import ExpectationKind


class StringEqualityComparator(BaseComparator):
    """Compara el valor real renderizado con ``str()`` del valor esperado."""

    def __init__(self):
        super().__init__(
            comparator_id="string",
            description="Igualdad del valor renderizado con el esperado como texto"
        )

    def compare(self, actual_field: Any, kind: ExpectationKind, expected: Any, accessor: FieldAccessor) -> bool:
        return accessor.render(actual_field, kind) == str(expected)
