"""Process-wide default font map.

The default map covers Times, Courier and Helvetica at pitches 8, 9, 10, 12,
14 and 15. It is built on first access and reused for the remainder of the
process.
"""

import logging
import threading
from typing import Callable

from psfontmap.core.font_map import FontMap, FontRequest, build_map

logger = logging.getLogger(__name__)

DEFAULT_PITCHES = (8, 9, 10, 12, 14, 15)

DEFAULT_FONT_REQUESTS = (
    FontRequest("Times", DEFAULT_PITCHES),
    FontRequest("Courier", DEFAULT_PITCHES),
    FontRequest("Helvetica", DEFAULT_PITCHES),
)


def _build_default_map() -> FontMap:
    return build_map(DEFAULT_FONT_REQUESTS)


class DefaultFontMap:
    """Lazily built font map, initialized at most once.

    The holder starts uninitialized. The first ``get()`` builds the map under a
    lock; every later call returns the same instance. If the build raises, the
    holder stays uninitialized and the next call retries.

    Args:
        factory: Builds the map. Defaults to the default font requests with
            ``Settings.default()`` collaborators.
    """

    def __init__(self, factory: Callable[[], FontMap] | None = None) -> None:
        self._factory = factory or _build_default_map
        self._font_map: FontMap | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._font_map is not None

    def get(self) -> FontMap:
        font_map = self._font_map
        if font_map is not None:
            return font_map
        with self._lock:
            if self._font_map is None:
                logger.debug("Building default font map")
                self._font_map = self._factory()
            return self._font_map


_default_font_map = DefaultFontMap()


def default_map() -> FontMap:
    """Get the process-wide default font map."""
    return _default_font_map.get()
