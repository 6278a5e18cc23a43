"""Unit tests for brush styling value objects."""

import unittest

from freehand_lib import config
from freehand_lib.domain.style import BrushStyle, Shadow


class TestShadow(unittest.TestCase):

    def test_defaults_follow_config(self):
        """Shadow and brush share the configured default color."""
        self.assertEqual(Shadow().color, config.DEFAULT_COLOR)
        self.assertEqual(Shadow().color, BrushStyle().color)

    def test_copy_leaves_original(self):
        shadow = Shadow(blur=3)
        committed = shadow.copy(affect_stroke=True)
        self.assertTrue(committed.affect_stroke)
        self.assertFalse(shadow.affect_stroke)
        self.assertEqual(committed.blur, 3)


class TestBrushStyle(unittest.TestCase):

    def test_defaults(self):
        style = BrushStyle()
        self.assertEqual(style.width, config.DEFAULT_WIDTH)
        self.assertEqual(style.line_cap, 'round')
        self.assertIsNone(style.shadow)

    def test_dash_array_stored_as_tuple(self):
        self.assertEqual(BrushStyle(dash_array=[4, 2]).dash_array, (4, 2))

    def test_invalid_values_rejected(self):
        with self.assertRaises(ValueError):
            BrushStyle(width=-1)
        with self.assertRaises(ValueError):
            BrushStyle(line_cap='pointy')
        with self.assertRaises(ValueError):
            BrushStyle(line_join='bent')
