from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


class TextNormalizer:
    """Flatten an arbitrary JSON-like value into one lowercase, space-collapsed string.

    Mapping keys are ignored; only values contribute, in iteration order.
    The walk is bounded: containers nested deeper than ``max_depth`` and any
    node past ``max_nodes`` contribute nothing, and a container that is
    already being walked (a cycle) is skipped.
    """

    def __init__(self, max_depth: int = 64, max_nodes: int = 100_000) -> None:
        self._max_depth = max_depth
        self._max_nodes = max_nodes

    def normalize(self, value: Any) -> str:
        walk = _Walk(self._max_depth, self._max_nodes)
        walk.visit(value, depth=0)
        if walk.truncated:
            logger.warning(
                "normalization truncated",
                extra={"max_depth": self._max_depth, "max_nodes": self._max_nodes, "nodes": walk.nodes},
            )
        return _WHITESPACE_RE.sub(" ", " ".join(walk.parts)).strip()


class _Walk:
    def __init__(self, max_depth: int, max_nodes: int) -> None:
        self.max_depth = max_depth
        self.max_nodes = max_nodes
        self.parts: list[str] = []
        self.nodes = 0
        self.truncated = False
        self._active: set[int] = set()

    def visit(self, value: Any, depth: int) -> None:
        if self.nodes >= self.max_nodes:
            self.truncated = True
            return
        self.nodes += 1

        if isinstance(value, Mapping):
            self._visit_children(value, value.values(), depth)
        elif isinstance(value, (list, tuple)):
            self._visit_children(value, value, depth)
        else:
            text = scalar_text(value)
            if text:
                self.parts.append(text)

    def _visit_children(self, container: Any, children: Any, depth: int) -> None:
        if depth >= self.max_depth:
            self.truncated = True
            return
        marker = id(container)
        if marker in self._active:
            logger.warning("cyclic reference skipped during normalization")
            return
        self._active.add(marker)
        try:
            for child in children:
                self.visit(child, depth + 1)
        finally:
            self._active.discard(marker)


def scalar_text(value: Any) -> str:
    """Canonical lowercase text of a scalar; empty for null."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).lower()


_default_normalizer = TextNormalizer()


def flatten_json(value: Any) -> str:
    return _default_normalizer.normalize(value)
