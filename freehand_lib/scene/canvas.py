"""Reference host canvas.

The brush needs a host that owns the preview surface, keeps the committed
objects, repaints on request and tells listeners when a stroke is
committed. Canvas is a minimal in-process implementation of that host,
used by the PencilBrush facade and by the tests.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

from .surface import PreviewSurface, RecordingSurface
from .vector_path import VectorPath

_logger = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any]], None]


class Canvas:
    """Object collection plus preview surface with a small event system.

    Attributes:
        context_top: Preview surface the brush paints on.
        objects: Committed objects in insertion order.
        render_count: Number of full repaints performed.
        render_requests: Number of deferred repaint requests.
    """

    def __init__(self, context_top: Optional[PreviewSurface] = None):
        self.context_top = context_top if context_top is not None else RecordingSurface()
        self.objects: List[VectorPath] = []
        self.render_count = 0
        self.render_requests = 0
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)

    def add(self, obj: VectorPath) -> None:
        self.objects.append(obj)
        _logger.debug("Added object %r", obj)

    def remove(self, obj: VectorPath) -> None:
        self.objects.remove(obj)

    def clear_context(self, surface: PreviewSurface) -> None:
        surface.clear()

    def render_all(self) -> None:
        """Repaint committed objects immediately."""
        self.render_count += 1

    def request_render_all(self) -> None:
        """Schedule a repaint. Counted here, there is no frame loop."""
        self.render_requests += 1

    def on(self, event: str, handler: EventHandler) -> None:
        self._handlers[event].append(handler)

    def off(self, event: str, handler: Optional[EventHandler] = None) -> None:
        """Remove one handler, or every handler of event when None."""
        if handler is None:
            self._handlers.pop(event, None)
        elif handler in self._handlers.get(event, []):
            self._handlers[event].remove(handler)

    def fire(self, event: str, options: Optional[Dict[str, Any]] = None) -> None:
        """Call every handler of event with options, in registration order."""
        payload = options or {}
        for handler in list(self._handlers.get(event, [])):
            handler(payload)
