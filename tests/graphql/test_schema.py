"""
Tests for the GraphQL schema shape and startup validation
"""

import pytest
from graphql import GraphQLInputObjectType, GraphQLObjectType, build_schema

from userdir.graphql.schema import schema, validate_schema

EXPECTED_SDL = """
type User { id: Int!, login: String!, firstname: String, lastname: String, email: String }
input UserInput { login: String!, firstname: String, lastname: String, email: String }
type Query { users: [User!]!, userById(id: Int!): User }
type Mutation { addUser(user: UserInput!): User, editUser(id: Int!, user: UserInput!): User }
"""


def _describe(type_):
    """Map each field to its printed type and argument types."""
    described = {}
    for name, field in type_.fields.items():
        args = getattr(field, "args", None) or {}
        described[name] = (str(field.type), {a: str(arg.type) for a, arg in args.items()})
    return described


@pytest.mark.parametrize("type_name", ["User", "UserInput", "Query", "Mutation"])
def test_schema_matches_reference_sdl(type_name):
    expected = build_schema(EXPECTED_SDL).type_map[type_name]
    actual = schema._schema.type_map[type_name]

    assert type(actual) is type(expected)
    assert isinstance(actual, GraphQLObjectType | GraphQLInputObjectType)
    assert _describe(actual) == _describe(expected)


def test_field_order_is_preserved():
    user_type = schema._schema.type_map["User"]

    assert list(user_type.fields) == ["id", "login", "firstname", "lastname", "email"]


def test_validate_schema_succeeds():
    validate_schema()
