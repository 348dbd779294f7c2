# graphql_matchers/matchers.py
"""
Puntos de entrada públicos de los matchers.
"""

from .field_matcher import HaveAField, FieldCollection


def have_a_field(field_name: str) -> HaveAField:
    """Campo de un tipo objeto o interfaz."""
    return HaveAField(field_name, FieldCollection.FIELDS)


def have_an_input_field(field_name: str) -> HaveAField:
    """Campo de un input object."""
    return HaveAField(field_name, FieldCollection.INPUT_FIELDS)


def have_a_return_field(field_name: str) -> HaveAField:
    """Campo devuelto por una mutación."""
    return HaveAField(field_name, FieldCollection.RETURN_FIELDS)
