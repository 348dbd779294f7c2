# comparators/__init__.py
"""
Exporta todos los comparadores de expectativas.
"""

from .base_comparator import BaseComparator
from .string_equality import StringEqualityComparator
from .mapping_equality import MappingEqualityComparator
from .arguments import ArgumentsComparator
from .authorization import AuthorizationComparator

# Comparadores disponibles por defecto
ALL_COMPARATORS = {
    "string": StringEqualityComparator,
    "mapping": MappingEqualityComparator,
    "arguments": ArgumentsComparator,
    "authorize": AuthorizationComparator
}

__all__ = [
    'BaseComparator',
    'StringEqualityComparator',
    'MappingEqualityComparator',
    'ArgumentsComparator',
    'AuthorizationComparator',
    'ALL_COMPARATORS'
]
