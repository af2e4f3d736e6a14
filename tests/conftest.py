# -*- coding: utf-8 -*-
""" Global fixtures """

import pytest

from gql_pipeline import reset_defaults
from gql_pipeline.validation import SPECIFIED_RULES


@pytest.fixture
def starwars_schema():
    from ._star_wars import StarWarsSchema

    return StarWarsSchema


@pytest.fixture
def raiser():
    def factory(cls, *args, **kwargs):
        assert issubclass(cls, Exception)

        def _raiser(*_a, **_kw):
            raise cls(*args, **kwargs)

        return _raiser

    return factory


@pytest.fixture(autouse=True)
def _restore_global_state():
    rules = list(SPECIFIED_RULES)
    yield
    SPECIFIED_RULES[:] = rules
    reset_defaults()
