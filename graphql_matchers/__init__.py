# graphql_matchers/__init__.py
"""
Matchers encadenables para verificar campos de esquemas GraphQL.
"""

from .matchers import have_a_field, have_an_input_field, have_a_return_field
from .field_matcher import (
    HaveAField,
    Expectation,
    ExpectationKind,
    FieldCollection,
    MatchResult,
    ComparatorRegistry,
    BaseComparator
)
from .exceptions import (
    GraphQLMatcherError,
    MatcherConfigurationError,
    InvalidGraphObjectError,
    UnsupportedFieldError,
    MatcherNotEvaluatedError
)
from .naming import camelize

__all__ = [
    'have_a_field',
    'have_an_input_field',
    'have_a_return_field',
    'HaveAField',
    'Expectation',
    'ExpectationKind',
    'FieldCollection',
    'MatchResult',
    'ComparatorRegistry',
    'BaseComparator',
    'GraphQLMatcherError',
    'MatcherConfigurationError',
    'InvalidGraphObjectError',
    'UnsupportedFieldError',
    'MatcherNotEvaluatedError',
    'camelize'
]
