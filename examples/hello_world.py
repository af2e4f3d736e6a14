# -*- coding: utf-8 -*-
from graphql import build_schema

from gql_pipeline import graphql_blocking

schema = build_schema(
    """
    type Query {
        hello(value: String = "world"): String!
    }
    """
)


class Root:
    def hello(self, context, info, value):
        return "Hello {}!".format(value)


result = graphql_blocking(
    schema, '{ hello(value: "World") }', root_value=Root()
)
assert result.to_dict() == {"data": {"hello": "Hello World!"}}
