"""Objetos GraphQL falsos para los tests de los matchers."""

import pytest


class FakeType:
    """Tipo con firma GraphQL propia."""

    def __init__(self, signature):
        self.signature = signature

    def to_graphql(self):
        return self.signature

    def __str__(self):
        return f"FakeType({self.signature})"


class FakeField:
    def __init__(
        self,
        name,
        type="String",
        property=None,
        hash_key=None,
        metadata=None,
        resolver=None,
        mutation=None,
        arguments=None,
        authorize=None
    ):
        self.name = name
        self.type = type
        self.property = property
        self.hash_key = hash_key
        self.metadata = metadata or {}
        self.resolver = resolver
        self.mutation = mutation
        self.arguments = arguments or {}
        self.authorize = authorize
        self._authorize = authorize

    def __repr__(self):
        return f"<FakeField {self.name}>"


class BareField:
    """Campo que solo expone su tipo."""

    def __init__(self, type="String"):
        self.type = type

    def __repr__(self):
        return "<BareField>"


class FakeObjectType:
    def __init__(self, name, fields):
        self.name = name
        self.fields = fields


class FakeInputObjectType:
    def __init__(self, name, fields):
        self.name = name
        self._fields = fields

    def input_fields(self):
        return self._fields


class FakeMutation:
    def __init__(self, name, fields):
        self.name = name
        self.return_fields = fields


@pytest.fixture
def query_type():
    return FakeObjectType("Query", {
        "name": FakeField("name", type="String"),
        "id": FakeField(
            "id",
            type=FakeType("ID!"),
            arguments={"filter": "String", "limit": "Int"},
            resolver="resolve_id"
        ),
        "firstName": FakeField(
            "firstName",
            property="first_name",
            hash_key="first_name",
            metadata={"deprecated": False, "tags": ["public"]},
            authorize=True
        ),
        "bare": BareField(),
    })
