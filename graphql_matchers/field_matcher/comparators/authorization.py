# comparators/authorization.py
"""
Comparador del requisito de autorización.
"""

from typing import Any

from .base_comparator import BaseComparator
from ..accessors import FieldAccessor
from ..models import ExpectationKind


class AuthorizationComparator(BaseComparator):
    """Compara el flag interno de autorización del campo."""

    def __init__(self):
        super().__init__(
            comparator_id="authorize",
            description="Requisito de autorización configurado"
        )

    @property
    def kind(self):
        return ExpectationKind.AUTHORIZE

    def compare(self, actual_field: Any, kind: ExpectationKind, expected: Any, accessor: FieldAccessor) -> bool:
        return accessor.authorization_flag(actual_field) == expected
