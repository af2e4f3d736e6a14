# -*- coding: utf-8 -*-
"""
Reject expensive queries before executing them.
"""

import logging

from graphql import build_schema

from gql_pipeline import execute_query
from gql_pipeline.tracers import SlowQueryLog
from gql_pipeline.validation import QueryComplexity, QueryDepth, add_rule

logging.basicConfig(level=logging.INFO)

schema = build_schema(
    """
    type User {
        name: String!
        friends(first: Int): [User!]!
    }

    type Query {
        me: User
    }
    """
)

schema.get_type("User").fields["friends"].extensions = {
    "complexity": lambda children, args: children * args.get("first", 10)
}

add_rule(QueryComplexity(50))
add_rule(QueryDepth(4))


class User:
    def __init__(self, name):
        self.name = name

    def friends(self, context, info, first=10):
        return [User("%s's friend #%d" % (self.name, i)) for i in range(first)]


root = {"me": User("Alice")}

ok = execute_query(
    schema,
    "query ($n: Int) { me { friends(first: $n) { name } } }",
    root,
    variable_values={"n": 3},
    instrumentation=SlowQueryLog(100),
)
print(ok.json(indent=2))

too_complex = execute_query(
    schema,
    "{ me { friends { friends { name } } } }",
    root,
)
print(too_complex.json(indent=2))
