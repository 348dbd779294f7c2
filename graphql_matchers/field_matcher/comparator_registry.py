# field_matcher/comparator_registry.py
"""
Registro central de comparadores.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Type, List, Optional

from .comparators import ALL_COMPARATORS, BaseComparator
from .models import Expectation, ExpectationKind

logger = logging.getLogger(__name__)

MAPPING_COMPARATOR_ID = "mapping"
DEFAULT_COMPARATOR_ID = "string"


class ComparatorRegistry:
    """Registro y resolución de comparadores por tipo de expectativa."""

    def __init__(self):
        self._comparators: Dict[str, BaseComparator] = {}
        self._by_kind: Dict[ExpectationKind, BaseComparator] = {}

        # Registrar comparadores por defecto
        self.register_default_comparators()

    def register_default_comparators(self):
        """Registra todos los comparadores por defecto."""
        for comparator_id, comparator_class in ALL_COMPARATORS.items():
            self.register_comparator(comparator_id, comparator_class)

    def register_comparator(self, comparator_id: str, comparator_class: Type[BaseComparator]):
        """Registra un nuevo comparador."""
        if comparator_id in self._comparators:
            raise ValueError(f"Comparador ya registrado: {comparator_id}")

        instance = comparator_class()
        kind = instance.kind
        if kind is not None and kind in self._by_kind:
            raise ValueError(
                f"Ya existe un comparador para '{kind.value}': "
                f"{self._by_kind[kind].comparator_id}"
            )

        self._comparators[comparator_id] = instance
        if kind is not None:
            self._by_kind[kind] = instance

        logger.debug(f"Comparador registrado: {comparator_id}")

    def unregister_comparator(self, comparator_id: str):
        """Elimina un comparador registrado."""
        if comparator_id not in self._comparators:
            raise ValueError(f"Comparador no encontrado: {comparator_id}")

        instance = self._comparators.pop(comparator_id)
        if instance.kind is not None and self._by_kind.get(instance.kind) is instance:
            del self._by_kind[instance.kind]

    def get_comparator(self, comparator_id: str) -> Optional[BaseComparator]:
        """Obtiene una instancia de comparador."""
        return self._comparators.get(comparator_id)

    def resolve(self, expectation: Expectation) -> BaseComparator:
        """
        Selecciona el comparador para una expectativa.

        Orden: mapping si el valor esperado es un mapping, después el
        comparador específico del tipo y por último igualdad textual.
        """
        if isinstance(expectation.expected, Mapping):
            comparator = self._comparators.get(MAPPING_COMPARATOR_ID)
            if comparator is not None:
                return comparator

        comparator = self._by_kind.get(expectation.kind)
        if comparator is not None:
            return comparator

        comparator = self._comparators.get(DEFAULT_COMPARATOR_ID)
        if comparator is None:
            raise ValueError(f"Comparador por defecto no registrado: {DEFAULT_COMPARATOR_ID}")
        return comparator

    def list_comparators(self) -> List[Dict]:
        """Lista todos los comparadores registrados."""
        return [
            {
                "comparator_id": comparator_id,
                "description": instance.description,
                "kind": instance.kind.value if instance.kind else None,
                "class": instance.__class__.__name__
            }
            for comparator_id, instance in self._comparators.items()
        ]
