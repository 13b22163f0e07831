"""Shared fixtures for the sovereignty assessment tests."""

import pytest
from pydantic_ai import models

from sovereignty_scorer.catalog import catalog_for
from sovereignty_scorer.config import reset_config
from sovereignty_scorer.schema import Language
from sovereignty_scorer.state import AssessmentState

# Tests must never reach a hosted model
models.ALLOW_MODEL_REQUESTS = False


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test with the built-in defaults, ignoring local config files."""
    monkeypatch.delenv("SOVEREIGNTY_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def en_catalog():
    return catalog_for(Language.EN)


@pytest.fixture
def es_catalog():
    return catalog_for(Language.ES)


@pytest.fixture
def en_objectives(en_catalog):
    objectives, _ = en_catalog
    return objectives


@pytest.fixture
def en_seals(en_catalog):
    _, seal_definitions = en_catalog
    return seal_definitions


@pytest.fixture
def state(en_objectives):
    return AssessmentState(en_objectives)
