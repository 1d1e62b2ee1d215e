"""Shared test fixtures for readergen."""

from pathlib import Path

import pytest

from readergen.registry import TemplateRegistry

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def registry():
    return TemplateRegistry()


@pytest.fixture
def manifest_file():
    return FIXTURES / "resources.yaml"
