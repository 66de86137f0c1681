"""
Cover session

Owns the single mutable Dimension Model. Every mutation recomputes
layout and annotations synchronously, then notifies subscribers with the
fresh values, in that order.
"""

from typing import Any, Callable, List, Optional

from bindmaster.config.logging_config import setup_logger
from bindmaster.cover.annotations import Annotation, build_annotations
from bindmaster.cover.dimensions import CoverDimensions, from_preset
from bindmaster.cover.layout import CoverSpecs, compute_specs

logger = setup_logger(__name__)

Listener = Callable[[CoverDimensions, CoverSpecs, List[Annotation]], None]


class CoverSession:
    """Dimension Model holder with recompute-on-mutation"""

    def __init__(self, dimensions: Optional[CoverDimensions] = None):
        self._dimensions = dimensions.copy() if dimensions else from_preset()
        self._listeners: List[Listener] = []
        self._recompute()

    @property
    def dimensions(self) -> CoverDimensions:
        # Callers get a copy; mutation goes through update()
        return self._dimensions.copy()

    @property
    def specs(self) -> CoverSpecs:
        return self._specs

    @property
    def annotations(self) -> List[Annotation]:
        return list(self._annotations)

    def update(self, **changes: Any) -> CoverSpecs:
        """
        Apply form edits and recompute.

        Args:
            **changes: Field names with raw values (numbers, numeric strings, unit strings)

        Returns:
            The new CoverSpecs
        """
        self._dimensions = self._dimensions.copy(**changes)
        logger.debug("Dimensions updated: %s", changes)
        self._recompute()
        return self._specs

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a renderer; returns a function that unsubscribes it."""
        self._listeners.append(listener)
        listener(self.dimensions, self._specs, self.annotations)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _recompute(self) -> None:
        self._specs = compute_specs(self._dimensions)
        self._annotations = build_annotations(self._dimensions, self._specs)
        for listener in list(self._listeners):
            listener(self.dimensions, self._specs, self.annotations)
