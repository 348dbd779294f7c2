# field_matcher/accessors.py
"""
Acceso verificado a los atributos de un campo.
"""

from typing import Any, Dict

from .models import ExpectationKind
from .renderer import render_value, DEFAULT_RENDER_METHOD

# Atributo leído en el campo para cada tipo de expectativa
ATTRIBUTE_NAMES: Dict[ExpectationKind, str] = {kind: kind.value for kind in ExpectationKind}

# Flag interno donde el campo guarda su requisito de autorización
AUTHORIZATION_FLAG = "_authorize"


class FieldAccessor:
    """Lee atributos de un campo comprobando antes que existan."""

    def __init__(self, render_method: str = DEFAULT_RENDER_METHOD):
        self.render_method = render_method

    @staticmethod
    def attribute_for(kind: ExpectationKind) -> str:
        return ATTRIBUTE_NAMES[kind]

    def supports(self, actual_field: Any, kind: ExpectationKind) -> bool:
        """Indica si el campo expone el atributo del tipo de expectativa."""
        return hasattr(actual_field, self.attribute_for(kind))

    def read(self, actual_field: Any, kind: ExpectationKind) -> Any:
        return getattr(actual_field, self.attribute_for(kind))

    def render(self, actual_field: Any, kind: ExpectationKind) -> str:
        """Valor real del atributo como texto, para comparar o explicar."""
        return render_value(self.read(actual_field, kind), self.render_method)

    @staticmethod
    def authorization_flag(actual_field: Any) -> Any:
        return getattr(actual_field, AUTHORIZATION_FLAG, None)
