# graphql_matchers/naming.py
"""
Normalización de nombres de campo a la convención camelCase de GraphQL.
"""

import re

_LEADING_UNDERSCORES = re.compile(r'\A(_+)')


def camelize(name: str) -> str:
    """
    Convierte un nombre snake_case a camelCase.

    Reglas:
        - Un nombre sin ``_`` (o exactamente ``"_"``) se devuelve tal cual.
        - Cada trozo se capitaliza (primera letra mayúscula, resto minúsculas).
        - La primera letra del resultado pasa a minúscula.
        - Los guiones bajos iniciales se conservan, los finales se descartan.

    Ejemplos:
        >>> camelize("first_name")
        'firstName'
        >>> camelize("_private_field")
        '_privateField'
    """
    name = str(name)
    if name == '_' or '_' not in name:
        return name

    camelized = ''.join(part.capitalize() for part in name.split('_') if part)
    if camelized:
        camelized = camelized[0].lower() + camelized[1:]

    leading = _LEADING_UNDERSCORES.match(name)
    if leading:
        camelized = f"{leading.group(1)}{camelized}"

    return camelized
