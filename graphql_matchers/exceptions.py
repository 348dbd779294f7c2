# graphql_matchers/exceptions.py
"""
Excepciones de configuración/uso de los matchers.

Un fallo de aserción nunca lanza excepción: fluye por el booleano de
``matches``. Estas excepciones indican un error del autor del test.
"""

from typing import Any, Optional


class GraphQLMatcherError(Exception):
    """Error base para todos los errores de los matchers."""
    pass


class MatcherConfigurationError(GraphQLMatcherError):
    """Error de uso: el objeto o el campo recibido no es válido para el matcher."""
    pass


class InvalidGraphObjectError(MatcherConfigurationError):
    """Error cuando el objeto recibido no expone la colección de campos."""

    def __init__(self, message: str, graph_object: Any = None, matcher_name: Optional[str] = None):
        self.graph_object = graph_object
        self.matcher_name = matcher_name
        super().__init__(message)


class UnsupportedFieldError(MatcherConfigurationError):
    """Error cuando el campo encontrado no expone el atributo solicitado."""

    def __init__(self, message: str, field_name: Optional[str] = None, attribute: Optional[str] = None):
        self.field_name = field_name
        self.attribute = attribute
        super().__init__(message)


class MatcherNotEvaluatedError(MatcherConfigurationError):
    """Error cuando se pide el mensaje de fallo antes de evaluar el matcher."""
    pass
