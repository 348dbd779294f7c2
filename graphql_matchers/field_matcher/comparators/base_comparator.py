# comparators/base_comparator.py
"""
Contrato base para todos los comparadores de expectativas.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..accessors import FieldAccessor
from ..models import ExpectationKind


class BaseComparator(ABC):
    """Interfaz base para comparadores."""

    def __init__(self, comparator_id: str, description: str):
        self.comparator_id = comparator_id
        self.description = description

    @property
    def kind(self) -> Optional[ExpectationKind]:
        """Tipo de expectativa que atiende el comparador (None = genérico)."""
        return None

    @abstractmethod
    def compare(
        self,
        actual_field: Any,
        kind: ExpectationKind,
        expected: Any,
        accessor: FieldAccessor
    ) -> bool:
        """
        Compara el atributo real del campo con el valor esperado.

        Args:
            actual_field: Campo encontrado en la colección
            kind: Tipo de expectativa evaluada
            expected: Valor esperado declarado en el matcher
            accessor: Acceso verificado a los atributos del campo

        Returns:
            True si el campo cumple la expectativa
        """
        pass

    def __repr__(self) -> str:
        return f"<Comparator {self.comparator_id}: {self.description}>"
