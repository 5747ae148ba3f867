"""Thread-safe accumulator of compiled artifacts."""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Iterable, Iterator

from atomicss.errors import ClassNameCollisionError
from atomicss.model.style import Artifact

logger = logging.getLogger("atomicss")


class StyleRegistry:
    """Deduplicating store of rules and keyframes keyed by identifier.

    A registry is passed explicitly to every compiler that should share it.
    All public methods hold a lock, so compilers running on different
    threads can merge into the same registry. Merges are all-or-nothing.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._artifacts: dict[str, Artifact] = {}

    # --- write ----------------------------------------------------------------

    def merge(self, artifacts: Iterable[Artifact]) -> list[Artifact]:
        """Add *artifacts*, skipping ones already present.

        Returns the artifacts that were new. Raises
        ``ClassNameCollisionError`` without adding anything if any incoming
        identifier already maps to a different body.
        """
        incoming = list(artifacts)
        with self._lock:
            staged: dict[str, Artifact] = {}
            for artifact in incoming:
                ident = artifact.identifier
                existing = self._artifacts.get(ident) or staged.get(ident)
                if existing is None:
                    staged[ident] = artifact
                elif existing != artifact:
                    raise ClassNameCollisionError(ident, existing.css.ltr, artifact.css.ltr)
            self._artifacts.update(staged)
        if staged:
            logger.debug("Registered %d new artifact(s)", len(staged))
        return list(staged.values())

    def clear(self) -> None:
        with self._lock:
            self._artifacts.clear()

    # --- read -----------------------------------------------------------------

    def get(self, identifier: str) -> Artifact | None:
        with self._lock:
            return self._artifacts.get(identifier)

    def artifacts(self) -> list[Artifact]:
        """All artifacts in order of first registration."""
        with self._lock:
            return list(self._artifacts.values())

    def sorted_artifacts(self) -> list[Artifact]:
        """All artifacts ordered by priority; ties keep registration order."""
        return sorted(self.artifacts(), key=lambda a: a.priority)

    def __contains__(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._artifacts

    def __len__(self) -> int:
        with self._lock:
            return len(self._artifacts)

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self.artifacts())

    # --- serialisation --------------------------------------------------------

    def to_metadata(self) -> list[list[Any]]:
        """``[identifier, {"ltr": ..., "rtl": ...}, priority]`` per artifact."""
        return [artifact.to_metadata() for artifact in self.artifacts()]

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_metadata(), indent=indent)

    def __repr__(self) -> str:
        return f"StyleRegistry(artifacts={len(self)})"
