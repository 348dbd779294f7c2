# field_matcher/matcher.py
"""
Matcher encadenable que verifica un campo de un objeto GraphQL.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..core.config import Settings, get_settings
from ..naming import camelize
from .accessors import FieldAccessor
from .comparator_registry import ComparatorRegistry
from .descriptions import describe, describe_object, explain
from .errors import MatcherErrors
from .models import Expectation, ExpectationKind, FieldCollection, MatchResult

logger = logging.getLogger(__name__)


class HaveAField:
    """
    Verifica que un objeto defina un campo y que éste cumpla las expectativas
    declaradas.

    Ejemplo:
        >>> matcher = HaveAField("id").of_type("ID!").with_args("filter")
        >>> matcher.matches(query_type)
        True
    """

    def __init__(
        self,
        expected_field_name: str,
        fields: Union[FieldCollection, str] = FieldCollection.FIELDS,
        settings: Optional[Settings] = None,
        registry: Optional[ComparatorRegistry] = None
    ):
        self.settings = settings or get_settings()
        self.fields = FieldCollection(fields)
        self.expected_field_name = self._normalize_name(expected_field_name)
        self.registry = registry or ComparatorRegistry()
        self.accessor = FieldAccessor(render_method=self.settings.RENDER_METHOD)

        self._expectations: List[Expectation] = []
        self._graph_object: Any = None
        self._result: Optional[MatchResult] = None

    @property
    def matcher_name(self) -> str:
        return self.fields.matcher_name

    @property
    def expectations(self) -> Tuple[Expectation, ...]:
        return tuple(self._expectations)

    @property
    def result(self) -> Optional[MatchResult]:
        """Resultado de la última evaluación (None si no se evaluó)."""
        return self._result

    # Construcción de la cadena de expectativas

    def that_returns(self, expected_field_type: Any) -> 'HaveAField':
        return self._expect(ExpectationKind.TYPE, expected_field_type)

    returning = that_returns
    of_type = that_returns

    def with_mutation(self, expected_mutation: Any) -> 'HaveAField':
        return self._expect(ExpectationKind.MUTATION, expected_mutation)

    def with_args(self, *expected_argument_names: Any) -> 'HaveAField':
        # Acepta with_args("a", "b") y with_args(["a", "b"])
        if len(expected_argument_names) == 1 and isinstance(expected_argument_names[0], (list, tuple)):
            expected_argument_names = expected_argument_names[0]
        return self._expect(ExpectationKind.ARGUMENTS, tuple(expected_argument_names))

    def with_authorization(self) -> 'HaveAField':
        return self._expect(ExpectationKind.AUTHORIZE, True)

    def with_property(self, expected_property_name: Any) -> 'HaveAField':
        return self._expect(ExpectationKind.PROPERTY, expected_property_name)

    def with_hash_key(self, expected_hash_key: Any) -> 'HaveAField':
        return self._expect(ExpectationKind.HASH_KEY, expected_hash_key)

    def with_metadata(self, expected_metadata: Mapping) -> 'HaveAField':
        return self._expect(ExpectationKind.METADATA, expected_metadata)

    def with_resolver(self, expected_resolver: Any) -> 'HaveAField':
        return self._expect(ExpectationKind.RESOLVER, expected_resolver)

    def _expect(self, kind: ExpectationKind, expected: Any) -> 'HaveAField':
        self._expectations.append(Expectation(kind=kind, expected=expected))
        return self

    # Evaluación

    def matches(self, graph_object: Any) -> bool:
        """
        Evalúa el matcher contra un objeto GraphQL.

        Args:
            graph_object: Objeto que expone la colección de campos

        Returns:
            True si el campo existe y cumple todas las expectativas

        Raises:
            InvalidGraphObjectError: El objeto no expone la colección
            UnsupportedFieldError: El campo no expone un atributo esperado
        """
        self._graph_object = graph_object
        self._result = None

        actual_field = self._field_collection(graph_object).get(self.expected_field_name)
        if actual_field is None:
            logger.debug(f"Campo '{self.expected_field_name}' no encontrado en {self.fields.value}")
            self._result = MatchResult(field_found=False)
            return False

        outcomes: Dict[ExpectationKind, bool] = {}
        for expectation in self._expectations:
            passed = self._expectation_matches(actual_field, expectation)
            logger.debug(f"{self.expected_field_name}.{expectation.kind.value}: {'OK' if passed else 'FALLO'}")
            # Un tipo repetido solo cumple si cumplen todas sus declaraciones
            outcomes[expectation.kind] = outcomes.get(expectation.kind, True) and passed

        self._result = MatchResult(field_found=True, actual_field=actual_field, outcomes=outcomes)
        logger.info(f"{self.matcher_name} `{self.expected_field_name}`: {self._result.matched}")
        return self._result.matched

    def _expectation_matches(self, actual_field: Any, expectation: Expectation) -> bool:
        self._ensure_attribute_exists(actual_field, expectation.kind)
        comparator = self.registry.resolve(expectation)
        return bool(comparator.compare(actual_field, expectation.kind, expectation.expected, self.accessor))

    def _ensure_attribute_exists(self, actual_field: Any, kind: ExpectationKind):
        if self.accessor.supports(actual_field, kind):
            return
        raise MatcherErrors.unsupported_field(
            self.expected_field_name,
            self.accessor.attribute_for(kind),
            actual_field
        )

    def _field_collection(self, graph_object: Any) -> Mapping:
        if not hasattr(graph_object, self.fields.value):
            raise MatcherErrors.invalid_graph_object(graph_object, self.matcher_name)

        collection = getattr(graph_object, self.fields.value)
        if callable(collection):
            collection = collection()
        return collection

    def _normalize_name(self, field_name: str) -> str:
        if self.settings.CAMELIZE_FIELD_NAMES:
            return camelize(str(field_name))
        return str(field_name)

    # Mensajes

    def description(self) -> str:
        return describe(self.expected_field_name, self._expectations)

    def explanation(self) -> str:
        return explain(self._result, self.accessor)

    def failure_message(self) -> str:
        self._ensure_evaluated()
        return (
            f"expected {describe_object(self._graph_object)} to "
            f"{self.description()}, {self.explanation()}."
        )

    def failure_message_when_negated(self) -> str:
        self._ensure_evaluated()
        return f"expected {describe_object(self._graph_object)} not to {self.description()}."

    def _ensure_evaluated(self):
        if self._result is None:
            raise MatcherErrors.not_evaluated(self.matcher_name)

    def __repr__(self) -> str:
        return f"<{self.matcher_name} {self.description()}>"
