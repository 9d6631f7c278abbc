"""Pytest configuration and shared fixtures for the mdxview test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import pytest
from utils import PropsRecorder

from mdxview.components import Components
from mdxview.transform import TreeTransformer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def recorder() -> PropsRecorder:
    """Provide a props-recording component."""
    return PropsRecorder()


@pytest.fixture
def components(recorder: PropsRecorder) -> Components:
    """Provide a registry with ``Widget`` bound to the recorder.

    Returns
    -------
    Components
        Registry with a single ``Widget`` component

    """
    registry = Components()
    registry.add_props("Widget", recorder, lambda props: props)
    return registry


@pytest.fixture
def transformer(components: Components) -> TreeTransformer:
    """Provide a transformer using the ``components`` fixture."""
    return TreeTransformer(components)
