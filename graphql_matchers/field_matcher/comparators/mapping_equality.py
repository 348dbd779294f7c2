# comparators/mapping_equality.py
"""
Comparador para valores esperados de tipo mapping (ej: metadata).
"""

from typing import Any

from .base_comparator import BaseComparator
from ..accessors import FieldAccessor
from ..models import ExpectationKind


class MappingEqualityComparator(BaseComparator):
    """Igualdad estructural entre el mapping real y el esperado."""

    def __init__(self):
        super().__init__(
            comparator_id="mapping",
            description="Igualdad profunda de mappings"
        )

    def compare(self, actual_field: Any, kind: ExpectationKind, expected: Any, accessor: FieldAccessor) -> bool:
        return accessor.read(actual_field, kind) == expected
