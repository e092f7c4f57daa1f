"""Pytest configuration and fixtures."""

import os
import pytest
from hypothesis import HealthCheck, settings as hypothesis_settings

from uiforge.core import ComponentKind, Settings
from uiforge.agents.models import UINode
from uiforge.agents.planner import Planner
from uiforge.agents.generator import Generator
from uiforge.handlers import GenerateHandler, VersionStore


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['UIFORGE_PORT'] = '5001'  # Different port for tests
    os.environ['UIFORGE_JSON_LOGS'] = 'false'


# First text draws in a fresh process are slow; property tests tolerate it
hypothesis_settings.register_profile(
    "uiforge",
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
hypothesis_settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "uiforge"))


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Fresh test settings (not the cached instance)."""
    return Settings()


@pytest.fixture
def planner():
    """Planner with default limits."""
    return Planner()


@pytest.fixture
def generator():
    """Tree generator."""
    return Generator()


@pytest.fixture
def version_store():
    """Empty version history."""
    return VersionStore()


@pytest.fixture
def generate_handler(planner, generator, version_store):
    """Pipeline handler over an empty history."""
    return GenerateHandler(planner=planner, generator=generator, store=version_store)


@pytest.fixture
def client(settings):
    """HTTP test client over a fresh app and history."""
    from fastapi.testclient import TestClient
    from uiforge.main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def empty_tree():
    """Root card without children."""
    return UINode(kind=ComponentKind.CARD, props={"title": "UI", "subtitle": "empty"})


@pytest.fixture
def sample_tree():
    """Root card with three children."""
    return UINode(
        kind=ComponentKind.CARD,
        props={"title": "UI", "subtitle": "sample"},
        children=[
            UINode(kind=ComponentKind.NAVBAR, props={"title": "App", "links": []}),
            UINode(
                kind=ComponentKind.TABLE,
                props={"headers": ["Name", "Value"], "rows": [["a", "1"]]},
            ),
            UINode(kind=ComponentKind.BUTTON, props={"children": "Save", "variant": "primary"}),
        ],
    )


@pytest.fixture
def wide_tree():
    """Root card with five children."""
    kinds = [
        ComponentKind.NAVBAR,
        ComponentKind.SIDEBAR,
        ComponentKind.CHART,
        ComponentKind.INPUT,
        ComponentKind.BUTTON,
    ]
    return UINode(
        kind=ComponentKind.CARD,
        props={"title": "UI"},
        children=[UINode(kind=k, props={"id": f"n{i}"}) for i, k in enumerate(kinds)],
    )

