"""Shared test fixtures for the sector diagram tests."""
import pytest
from sectors.construction import compute_construction
from sectors.gen_svg import render_svg
from sectors.style import DiagramConfig


@pytest.fixture(scope="session")
def construction():
    """Construction from the default seeds."""
    return compute_construction()


@pytest.fixture(scope="session")
def seeds(construction):
    return construction.seeds


@pytest.fixture(scope="session")
def svg_doc(construction):
    """Light-scheme SVG with every layer visible."""
    return render_svg(construction, DiagramConfig())


@pytest.fixture
def small_config():
    """Small raster size so canvas tests stay fast."""
    return DiagramConfig(ratio=280)
