"""Pytest configuration and shared fixtures for the wiki2md test suite."""

import os
from io import StringIO

import pytest
from hypothesis import Phase, Verbosity, settings

from wiki2md.renderers.markdown import MarkdownRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def output() -> StringIO:
    """Provide an in-memory text sink."""
    return StringIO()


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Provide a Markdown renderer with default options."""
    return MarkdownRenderer()
