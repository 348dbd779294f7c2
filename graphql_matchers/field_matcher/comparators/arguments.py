# comparators/arguments.py
"""
Comparador de nombres de argumentos.
"""

from typing import Any, List

from .base_comparator import BaseComparator
from ..accessors import FieldAccessor
from ..models import ExpectationKind


class ArgumentsComparator(BaseComparator):
    """Compara la lista de nombres de argumentos del campo con la esperada."""

    def __init__(self):
        super().__init__(
            comparator_id="arguments",
            description="Nombres de argumentos del campo"
        )

    @property
    def kind(self):
        return ExpectationKind.ARGUMENTS

    def compare(self, actual_field: Any, kind: ExpectationKind, expected: Any, accessor: FieldAccessor) -> bool:
        actual_names = self._argument_names(accessor.read(actual_field, kind))
        return actual_names == [str(name) for name in expected]

    @staticmethod
    def _argument_names(arguments: Any) -> List[str]:
        # Los argumentos llegan como mapping nombre -> argumento
        if hasattr(arguments, 'keys'):
            arguments = arguments.keys()
        return [str(name) for name in arguments]
