"""TreeCache: LRU cache of built schema trees.

Device data models are validated and built far more often than they change,
typically once per incoming device registration or visualization request.
``TreeCache`` keeps the most recently used trees in memory, keyed by the
exact descriptor tuple they were built from.  LRU eviction occurs silently
when ``max_size`` is exceeded.

Each ``TreeCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two separate instances never interfere with
each other.  Instances are not synchronized.

Example::

    from device_schema.cache import TreeCache

    cache = TreeCache(max_size=64)
    tree = cache.get(descriptors)          # builds
    same = cache.get(list(descriptors))    # served from memory
    assert tree is same
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cachetools import LRUCache

from device_schema.config import SchemaConfig
from device_schema.tree.builder import TreeBuilder
from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.schema_tree import SchemaTree

__all__ = ["TreeCache"]

logger = logging.getLogger(__name__)


class TreeCache:
    """LRU-backed cache in front of a ``TreeBuilder``.

    Failed builds are never cached; ``get`` raises
    ``SchemaValidationError`` for them every time.

    Args:
        max_size: Maximum number of trees to hold.  Defaults to 128.
        config: Limits used for every build.  Defaults to ``SchemaConfig()``.
    """

    def __init__(self, max_size: int = 128, config: SchemaConfig | None = None) -> None:
        self._builder = TreeBuilder(config)
        self._cache: LRUCache[tuple[NodeDescriptor, ...], SchemaTree] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of trees stored in the cache."""
        return int(self._cache.currsize)

    @property
    def config(self) -> SchemaConfig:
        return self._builder.config

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, descriptors: Sequence[NodeDescriptor]) -> SchemaTree:
        """Return the tree for ``descriptors``, building it on a miss.

        Raises:
            SchemaValidationError: If the descriptors do not form a valid tree.
            TypeError: If ``descriptors`` is None.
        """
        if descriptors is None:
            raise TypeError("descriptors must not be None")

        key = tuple(descriptors)
        tree = self._cache.get(key)
        if tree is not None:
            logger.debug("Tree cache hit (%d descriptors)", len(key))
            return tree

        logger.debug("Tree cache miss (%d descriptors)", len(key))
        tree = self._builder.build(key)
        self._cache[key] = tree
        return tree

    def __contains__(self, descriptors: Sequence[NodeDescriptor]) -> bool:
        return tuple(descriptors) in self._cache

    def clear(self) -> None:
        """Drop every cached tree."""
        self._cache.clear()
