from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from models import CompanyNode
from ports.source import RecordSourcePort
from services.errors import NotInitializedError
from services.tree_builder import build_tree

logger = logging.getLogger(__name__)


class HierarchyStore:
    """Holds the currently loaded company tree.

    Lifecycle: ``initialize()`` at startup, ``get_root()`` from queries,
    ``rebuild()`` when source data changes, ``close()`` at shutdown. Readers
    always see either the old or the new tree, never a partial one.
    """

    def __init__(self, source: RecordSourcePort) -> None:
        self.source = source
        self._root: Optional[CompanyNode] = None
        self._lock = threading.Lock()
        self.generation = 0

    @property
    def is_initialized(self) -> bool:
        return self._root is not None

    def initialize(self) -> None:
        with self._lock:
            if self._root is not None:
                return
            self._load()

    def rebuild(self) -> None:
        with self._lock:
            self._load()

    def get_root(self) -> CompanyNode:
        root = self._root
        if root is None:
            raise NotInitializedError("Company tree not initialized")
        return root

    def close(self) -> None:
        with self._lock:
            self._root = None

    def _load(self) -> None:
        # Caller holds the lock; a failure leaves the previous root published.
        started = time.perf_counter()
        try:
            companies = self.source.load_companies()
            relations = self.source.load_relations()
            root = build_tree(companies, relations)
        except Exception as e:
            logger.error(
                "Company tree build failed",
                extra={
                    "step": "build_tree",
                    "status": "error",
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                    "error": type(e).__name__,
                },
            )
            raise
        self._root = root
        self.generation += 1
        logger.info(
            "Company tree ready (generation %d)",
            self.generation,
            extra={
                "step": "build_tree",
                "status": "ok",
                "duration_ms": int((time.perf_counter() - started) * 1000),
                "nodes": len(companies),
            },
        )
