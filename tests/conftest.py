"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate the canvas fields declared at import time.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture(autouse=True)
def reset_canvas_data():
    """Reset the canvas before and after each test.

    This ensures tests are isolated from each other.
    """
    # Import here so the canvas fields are declared after ti.init()
    from src.minitrace.core.canvas import reset_canvas

    reset_canvas()
    yield
    reset_canvas()
