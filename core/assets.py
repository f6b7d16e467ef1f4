"""Path-addressed asset handles shared across the app."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontHandle:
    """Opaque reference to a font file; resolved to a real font by the renderer."""
    path: str


class AssetServer:
    """Hand out cached handles keyed by asset path.

    Loading is lazy: a handle only records the resolved path. Whoever draws
    with it is responsible for opening the file.
    """

    def __init__(self, root: str | Path = "assets"):
        self.root = Path(root)
        self._fonts: dict[str, FontHandle] = {}

    def load(self, path: str) -> FontHandle:
        handle = self._fonts.get(path)
        if handle is None:
            handle = FontHandle(str(self.root / path))
            self._fonts[path] = handle
            logger.debug("Registered font handle %s", handle.path)
        return handle

    def loaded_count(self) -> int:
        return len(self._fonts)
