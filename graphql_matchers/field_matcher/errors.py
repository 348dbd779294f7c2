# field_matcher/errors.py
"""
Errores normalizados del field_matcher.
"""

from typing import Any

from ..exceptions import (
    InvalidGraphObjectError,
    UnsupportedFieldError,
    MatcherNotEvaluatedError
)


class MatcherErrors:
    """Factory de errores de configuración de los matchers."""

    @staticmethod
    def invalid_graph_object(graph_object: Any, matcher_name: str) -> InvalidGraphObjectError:
        return InvalidGraphObjectError(
            f"Invalid object {graph_object} provided to {matcher_name} "
            "matcher. It does not seem to be a valid GraphQL object type.",
            graph_object=graph_object,
            matcher_name=matcher_name
        )

    @staticmethod
    def unsupported_field(field_name: str, attribute: str, actual_field: Any) -> UnsupportedFieldError:
        return UnsupportedFieldError(
            f"The `{field_name}` field defined by the GraphQL object "
            f"doesn't seem valid as it does not respond to #{attribute}. "
            f"\n\n\tThe field found was {actual_field!r}. ",
            field_name=field_name,
            attribute=attribute
        )

    @staticmethod
    def not_evaluated(matcher_name: str) -> MatcherNotEvaluatedError:
        return MatcherNotEvaluatedError(
            f"The {matcher_name} matcher has not been evaluated yet. "
            "Call matches() before asking for its failure message."
        )
