# field_matcher/renderer.py
"""
Representación textual de los valores reales de un campo.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_RENDER_METHOD = "to_graphql"


def render_value(value: Any, render_method: str = DEFAULT_RENDER_METHOD) -> str:
    """
    Convierte el valor de un atributo en texto.

    Si el valor expone el método de serialización del esquema y éste no
    lanza NotImplementedError, se usa su resultado cuando no está vacío.
    En cualquier otro caso se usa ``str(value)``.
    """
    # En una clase el hook es un método de instancia sin enlazar
    serializer = None if isinstance(value, type) else getattr(value, render_method, None)
    if not callable(serializer):
        return str(value)

    try:
        rendered = serializer()
    except NotImplementedError:
        logger.debug(f"{type(value).__name__}.{render_method} no implementado, usando str()")
        return str(value)

    rendered = "" if rendered is None else str(rendered)
    return rendered or str(value)
