"""Unit tests for the stroke session state machine."""

import logging
import unittest

from freehand_lib.brush.renderer import RenderCase
from freehand_lib.brush.session import SessionState, StrokeSession
from freehand_lib.domain.geometry import Point
from freehand_lib.domain.path import CurveTo, MoveTo
from freehand_lib.domain.style import BrushStyle, Shadow
from freehand_lib.scene.canvas import Canvas
from freehand_lib.scene.surface import RecordingSurface


def make_session(style=None):
    canvas = Canvas(RecordingSurface())
    return StrokeSession(canvas, style), canvas


def assert_continuous(test, path):
    """Every curve starts where the previous curve ended."""
    pen = None
    last_end = None
    for command in path:
        if isinstance(command, MoveTo):
            pen = command.point
            continue
        if not isinstance(command, CurveTo):
            continue
        if last_end is not None:
            test.assertEqual(pen, last_end)
        last_end = command.end
        pen = command.end


class TestTransitions(unittest.TestCase):
    """State changes across press, move and release."""

    def test_starts_idle(self):
        session, _ = make_session()
        self.assertIs(session.state, SessionState.IDLE)

    def test_press_move_release_cycle(self):
        session, canvas = make_session()
        session.press(Point(0, 0))
        self.assertIs(session.state, SessionState.CAPTURING)
        session.move(Point(5, 5))
        self.assertIs(session.state, SessionState.CAPTURING)
        result = session.release()
        self.assertIs(session.state, SessionState.IDLE)
        self.assertIsNotNone(result)
        self.assertEqual(canvas.objects, [result])

    def test_move_while_idle_is_ignored(self):
        session, canvas = make_session()
        self.assertIsNone(session.move(Point(1, 1)))
        self.assertEqual(len(session.path), 0)
        self.assertEqual(canvas.context_top.calls, [])

    def test_release_while_idle_is_ignored(self):
        session, canvas = make_session()
        with self.assertLogs('freehand_lib.brush.session', level=logging.WARNING):
            self.assertIsNone(session.release())
        self.assertEqual(canvas.objects, [])

    def test_press_while_capturing_starts_over(self):
        session, _ = make_session()
        session.press(Point(0, 0))
        session.move(Point(10, 0))
        session.press(Point(50, 50))
        self.assertEqual(session.path[0].point.y, 50)
        self.assertEqual(len(session.buffer), 1)


class TestCapture(unittest.TestCase):
    """Rendering driven by captured points."""

    def test_press_renders_dot(self):
        session, _ = make_session(BrushStyle(width=10))
        case = session.press(Point(5, 5))
        self.assertIs(case, RenderCase.DOT)
        self.assertEqual(session.path.to_text(), 'M 4.99 5 L 5.01 5')

    def test_press_applies_style_and_shadow(self):
        shadow = Shadow(color='rgb(0, 0, 255)', blur=2)
        style = BrushStyle(width=3, shadow=shadow)
        session, canvas = make_session(style)
        session.press(Point(1, 1))
        surface = canvas.context_top
        self.assertIs(surface.style, style)
        self.assertIs(surface.shadow, shadow)
        self.assertEqual(surface.names()[:3], ['apply_style', 'set_shadow', 'move_to'])

    def test_repeated_sample_does_not_render(self):
        session, canvas = make_session()
        session.press(Point(0, 0))
        session.move(Point(10, 0))
        calls_before = len(canvas.context_top.calls)
        commands_before = len(session.path)
        self.assertIsNone(session.move(Point(10, 0)))
        self.assertEqual(len(canvas.context_top.calls), calls_before)
        self.assertEqual(len(session.path), commands_before)

    def test_case_sequence(self):
        session, _ = make_session()
        cases = [session.press(Point(0, 0))]
        for p in [(10, 0), (10, 10), (0, 10), (0, 20)]:
            cases.append(session.move(Point(*p)))
        self.assertEqual(cases, [
            RenderCase.DOT, RenderCase.ANCHOR, RenderCase.FIRST_SEGMENT,
            RenderCase.SEGMENT, RenderCase.SEGMENT])
        self.assertIs(session.last_case, RenderCase.SEGMENT)

    def test_description_is_continuous(self):
        session, _ = make_session(BrushStyle(width=4))
        session.press(Point(0, 0))
        for p in [(3, 1), (7, 4), (12, 4), (15, 9), (15, 14), (11, 20), (4, 22)]:
            session.move(Point(*p))
        assert_continuous(self, session.path)

    def test_first_curve_collapses_onto_second_sample(self):
        """Press (0,0), drag to (10,0) and (10,10)."""
        session, _ = make_session()
        session.press(Point(0, 0))
        session.move(Point(10, 0))
        session.move(Point(10, 10))
        self.assertEqual(session.path[-2], MoveTo(Point(10, 0)))
        self.assertEqual(session.path[-1],
                         CurveTo(Point(10, 0), Point(10, 0), Point(10, 0)))

        session.move(Point(0, 10))
        self.assertEqual(session.path[-2], MoveTo(Point(10, 0)))
        self.assertEqual(session.path[-1].end, Point(10, 10))

    def test_surface_calls_mirror_description(self):
        """Every recorded command has the matching surface call."""
        session, canvas = make_session()
        session.press(Point(0, 0))
        for p in [(10, 0), (10, 10), (0, 10)]:
            session.move(Point(*p))
        geometry = canvas.context_top.geometry_calls()
        # The first call is the press position, before any render
        self.assertEqual(len(geometry) - 1, len(session.path))


class TestReset(unittest.TestCase):

    def test_reset_twice_equals_reset_once(self):
        session, _ = make_session()
        session.press(Point(0, 0))
        session.move(Point(10, 0))
        session.reset()
        self.assertEqual((len(session.buffer), len(session.path)), (0, 0))
        session.reset()
        self.assertEqual((len(session.buffer), len(session.path)), (0, 0))
