# field_matcher/__init__.py
"""
Micromódulo para verificar campos de objetos GraphQL con expectativas encadenadas.
"""

from .matcher import HaveAField
from .models import (
    Expectation,
    ExpectationKind,
    FieldCollection,
    MatchResult
)
from .errors import MatcherErrors
from .comparators import ALL_COMPARATORS, BaseComparator
from .comparator_registry import ComparatorRegistry
from .accessors import FieldAccessor
from .renderer import render_value

__all__ = [
    'HaveAField',
    'Expectation',
    'ExpectationKind',
    'FieldCollection',
    'MatchResult',
    'MatcherErrors',
    'ALL_COMPARATORS',
    'BaseComparator',
    'ComparatorRegistry',
    'FieldAccessor',
    'render_value'
]
