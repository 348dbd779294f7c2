# field_matcher/models.py
"""
Modelos de datos del field_matcher.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum


class ExpectationKind(Enum):
    TYPE = "type"
    PROPERTY = "property"
    HASH_KEY = "hash_key"
    METADATA = "metadata"
    RESOLVER = "resolver"
    MUTATION = "mutation"
    ARGUMENTS = "arguments"
    AUTHORIZE = "authorize"


class FieldCollection(Enum):
    FIELDS = "fields"                # Campos de un tipo objeto
    INPUT_FIELDS = "input_fields"    # Campos de un input object
    RETURN_FIELDS = "return_fields"  # Campos devueltos por una mutación

    @property
    def matcher_name(self) -> str:
        """Nombre del matcher que consulta esta colección."""
        return _MATCHER_NAMES[self]


_MATCHER_NAMES = {
    FieldCollection.FIELDS: "have_a_field",
    FieldCollection.INPUT_FIELDS: "have_an_input_field",
    FieldCollection.RETURN_FIELDS: "have_a_return_field",
}


@dataclass(frozen=True)
class Expectation:
    """Expectativa declarada sobre un atributo del campo."""
    kind: ExpectationKind
    expected: Any


@dataclass
class MatchResult:
    """Resultado de evaluar un matcher contra un objeto."""
    field_found: bool
    actual_field: Optional[Any] = None
    outcomes: Dict[ExpectationKind, bool] = field(default_factory=dict)  # kind -> cumple

    @property
    def matched(self) -> bool:
        return self.field_found and all(self.outcomes.values())

    def first_failure(self) -> Optional[ExpectationKind]:
        """Primer tipo de expectativa fallido, en orden de declaración."""
        for kind, passed in self.outcomes.items():
            if not passed:
                return kind
        return None
