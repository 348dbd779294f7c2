# field_matcher/descriptions.py
"""
Textos de descripción y explicación de fallos.
"""

from typing import Any, Iterable, Optional

from .accessors import FieldAccessor
from .models import Expectation, ExpectationKind, MatchResult

DESCRIPTIONS = {
    ExpectationKind.TYPE: 'of type `{}`',
    ExpectationKind.PROPERTY: 'reading from the `{}` property',
    ExpectationKind.HASH_KEY: 'reading from the `{}` hash_key',
    ExpectationKind.METADATA: 'with metadata `{}`',
    ExpectationKind.RESOLVER: 'with resolver `{}`',
    ExpectationKind.MUTATION: 'with mutation `{}`',
    ExpectationKind.ARGUMENTS: 'with arguments `{}`',
    ExpectationKind.AUTHORIZE: 'with authorization',
}

NO_FIELD_FOUND = 'but no field was found with that name'


def describe_expectation(expectation: Expectation) -> str:
    return DESCRIPTIONS[expectation.kind].format(_expected_text(expectation.expected))


def describe(field_name: str, expectations: Iterable[Expectation]) -> str:
    """Descripción completa: campo esperado más una cláusula por expectativa."""
    clauses = [f"define field `{field_name}`"]
    clauses.extend(describe_expectation(expectation) for expectation in expectations)
    return ', '.join(clauses)


def explain(result: Optional[MatchResult], accessor: FieldAccessor) -> str:
    """
    Explica el primer fallo en orden de declaración.

    Devuelve cadena vacía si no hay resultado o ninguna expectativa falló.
    """
    if result is None:
        return ''
    if not result.field_found:
        return NO_FIELD_FOUND

    kind = result.first_failure()
    if kind is None:
        return ''

    actual = accessor.render(result.actual_field, kind)
    return f"but the {kind.value} was `{actual}`"


def describe_object(graph_object: Any) -> str:
    """Identidad del objeto: su ``name`` si lo tiene, si no su repr."""
    name = getattr(graph_object, 'name', None)
    return str(name) if name else repr(graph_object)


def _expected_text(expected: Any) -> str:
    # with_args guarda una tupla, se muestra como lista
    if isinstance(expected, tuple):
        return str(list(expected))
    return str(expected)
