"""Renderer helpers that need no display."""
from __future__ import annotations

import numpy as np

from config import WATER_BOTTOM, WATER_TOP
from renderer import water_gradient


def test_water_gradient_shape_and_ends():
    grad = water_gradient(8, 50)
    assert grad.shape == (8, 50, 3)
    assert grad.dtype == np.uint8
    assert tuple(grad[0, 0]) == WATER_TOP
    assert tuple(grad[7, -1]) == WATER_BOTTOM


def test_water_gradient_is_uniform_across_columns():
    grad = water_gradient(5, 20)
    assert (grad == grad[0]).all()
