# tests/conftest.py
"""Shared test fixtures and Hypothesis configuration.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings
from structlog.stdlib import ProcessorFormatter

from dagledger.contracts import GraphDescription
from dagledger.core.history import DAGHistoryConverter
from tests.fixtures.graphs import make_linear_graph, make_union_graph


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore structlog and root logger state after tests that call configure_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def union_graph() -> GraphDescription:
    return make_union_graph()


@pytest.fixture
def linear_graph() -> GraphDescription:
    return make_linear_graph()


@pytest.fixture
def converter() -> DAGHistoryConverter:
    return DAGHistoryConverter()


# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
