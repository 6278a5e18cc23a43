"""Shared pytest fixtures for the freehand_lib test suite.

Fixtures:
    recording_canvas: Canvas whose preview surface records every call
    raster_canvas: Canvas painting into a 64x64 Pillow image
    thick_style: BrushStyle with width 10
    brush: PencilBrush on recording_canvas with default styling

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from freehand_lib import BrushStyle, Canvas, PencilBrush, RasterSurface, RecordingSurface  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def recording_canvas():
    """Return a Canvas whose context_top is a RecordingSurface."""
    return Canvas(RecordingSurface())


@pytest.fixture
def raster_canvas():
    """Return a Canvas whose context_top is a 64x64 RasterSurface."""
    return Canvas(RasterSurface(size=(64, 64)))


@pytest.fixture
def thick_style():
    """Return a 10px brush style, so a dot widens by 0.01 on each side."""
    return BrushStyle(color='rgb(255, 0, 0)', width=10)


@pytest.fixture
def brush(recording_canvas):
    """Return a PencilBrush with default styling on a recording canvas."""
    return PencilBrush(recording_canvas)


