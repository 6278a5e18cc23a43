"""Unit tests for PathFinalizer."""

import unittest

from freehand_lib.brush.finalizer import PathFinalizer
from freehand_lib.domain.geometry import Point
from freehand_lib.domain.path import EMPTY_STROKE_COMMANDS, PathDescription
from freehand_lib.domain.style import BrushStyle, Shadow
from freehand_lib.scene.canvas import Canvas
from freehand_lib.scene.surface import RecordingSurface


class FinalizerTestCase(unittest.TestCase):

    def setUp(self):
        self.canvas = Canvas(RecordingSurface())
        self.events = []
        self.canvas.on('path:created', self.events.append)
        self.finalizer = PathFinalizer(self.canvas)


class TestEmptyStroke(FinalizerTestCase):
    """Empty strokes are discarded but still clear the preview."""

    def test_canonical_marker_discarded(self):
        result = self.finalizer.finalize(PathDescription(EMPTY_STROKE_COMMANDS), BrushStyle())
        self.assertIsNone(result)
        self.assertEqual(self.canvas.objects, [])
        self.assertEqual(self.events, [])
        self.assertEqual(self.canvas.render_requests, 1)
        self.assertIn('clear', self.canvas.context_top.names())

    def test_no_commands_discarded(self):
        result = self.finalizer.finalize(PathDescription(), BrushStyle())
        self.assertIsNone(result)
        self.assertIn('clear', self.canvas.context_top.names())


class TestCommit(FinalizerTestCase):
    """A stroke with geometry becomes a VectorPath on the canvas."""

    def test_dot_is_committed(self):
        path = PathDescription.parse('M 4.99 5 L 5.01 5')
        style = BrushStyle(width=10)

        result = self.finalizer.finalize(path, style)

        self.assertIsNotNone(result)
        self.assertEqual(self.canvas.objects, [result])
        self.assertAlmostEqual(result.left, 4.99)
        self.assertEqual(result.top, 5)
        self.assertAlmostEqual(result.width, 0.02)
        self.assertEqual(result.height, 0)
        self.assertEqual(result.stroke_width, 10)

    def test_order_of_host_calls(self):
        path = PathDescription.parse('M 0 0 L 10 10')
        self.finalizer.finalize(path, BrushStyle())
        names = self.canvas.context_top.names()
        self.assertEqual(names[0], 'close_path')
        self.assertIn('clear', names)
        self.assertEqual(self.canvas.render_count, 1)

    def test_event_carries_committed_path(self):
        result = self.finalizer.finalize(PathDescription.parse('M 0 0 L 10 10'), BrushStyle())
        self.assertEqual(len(self.events), 1)
        self.assertIs(self.events[0]['path'], result)

    def test_coords_set(self):
        result = self.finalizer.finalize(PathDescription.parse('M 0 0 L 10 20'), BrushStyle())
        self.assertEqual(result.coords['tl'], Point(0, 0))
        self.assertEqual(result.coords['br'], Point(10, 20))

    def test_styling_copied(self):
        style = BrushStyle(color='#123456', width=3, line_cap='square', line_join='miter',
                           miter_limit=4, dash_array=[5, 2])
        result = self.finalizer.finalize(PathDescription.parse('M 0 0 L 10 10'), style)
        self.assertEqual(result.stroke, '#123456')
        self.assertEqual(result.stroke_line_cap, 'square')
        self.assertEqual(result.stroke_line_join, 'miter')
        self.assertEqual(result.stroke_miter_limit, 4)
        self.assertEqual(result.stroke_dash_array, (5, 2))
        self.assertIsNone(result.fill)

    def test_shadow_affects_stroke(self):
        shadow = Shadow(color='rgb(0, 0, 0)', blur=4, offset_x=2, offset_y=2)
        result = self.finalizer.finalize(PathDescription.parse('M 0 0 L 10 10'),
                                         BrushStyle(shadow=shadow))
        self.assertTrue(result.shadow.affect_stroke)
        self.assertEqual(result.shadow.blur, 4)
        self.assertFalse(shadow.affect_stroke)

    def test_preview_shadow_reset(self):
        self.canvas.context_top.set_shadow(Shadow())
        self.finalizer.finalize(PathDescription.parse('M 0 0 L 10 10'), BrushStyle())
        self.assertIsNone(self.canvas.context_top.shadow)


class TestOrigin(unittest.TestCase):
    """Stored position follows the configured origin convention."""

    def test_center_origin_stores_center(self):
        canvas = Canvas(RecordingSurface())
        finalizer = PathFinalizer(canvas, origin_x='center', origin_y='center')
        result = finalizer.finalize(PathDescription.parse('M 0 0 L 10 20'), BrushStyle())
        self.assertEqual((result.left, result.top), (5, 10))

    def test_right_bottom_origin(self):
        canvas = Canvas(RecordingSurface())
        finalizer = PathFinalizer(canvas, origin_x='right', origin_y='bottom')
        result = finalizer.finalize(PathDescription.parse('M 2 4 L 10 20'), BrushStyle())
        self.assertEqual((result.left, result.top), (10, 20))
        self.assertEqual(result.get_center_point(), Point(6, 12))
