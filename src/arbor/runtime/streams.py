from __future__ import annotations

import reactivex
from reactivex import operators as ops
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import Disposable

from arbor.errors import ArborError
from arbor.runtime.orchestration import GrowthConfig, GrowthResult, rebuild
from arbor.settings import GrowthSettings
from arbor.turtle.events import (BranchEvent, GrowthEvent, LeafEvent,
                                 RootEvent, RotateEvent)
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


class ObserverCallback:
    """Growth callback that forwards each event to a reactivex observer."""

    def __init__(self, observer: ObserverBase[GrowthEvent]) -> None:
        self._observer = observer

    def on_branch(self, event: BranchEvent) -> None:
        self._observer.on_next(event)

    def on_root(self, event: RootEvent) -> None:
        self._observer.on_next(event)

    def on_leaf(self, event: LeafEvent) -> None:
        self._observer.on_next(event)

    def on_rotate(self, event: RotateEvent) -> None:
        self._observer.on_next(event)


def growth_events(
    config: GrowthConfig, *, settings: GrowthSettings | None = None
) -> reactivex.Observable[GrowthEvent]:
    """Cold observable that runs one rebuild per subscription.

    A failed pass terminates the stream with ``on_error``; events already
    delivered belong to the aborted run.
    """

    def subscribe(
        observer: ObserverBase[GrowthEvent], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        try:
            rebuild(config, ObserverCallback(observer), settings=settings)
        except ArborError as error:
            observer.on_error(error)
        else:
            observer.on_completed()
        return Disposable()

    return reactivex.create(subscribe)


def rebuild_on_change(
    configs: reactivex.Observable[GrowthConfig],
    *,
    settings: GrowthSettings | None = None,
) -> reactivex.Observable[GrowthResult]:
    """Rebuild whenever ``configs`` emits a configuration different from the last.

    A configuration that fails to grow is logged and skipped; the stream keeps
    rebuilding on later changes.
    """

    def _rebuild(config: GrowthConfig) -> reactivex.Observable[GrowthResult]:
        try:
            result = rebuild(config, settings=settings)
        except ArborError as error:
            logger.error("Rebuild failed: %s", error)
            return reactivex.empty()
        return reactivex.just(result)

    return configs.pipe(
        ops.distinct_until_changed(),
        ops.flat_map(_rebuild),
        ops.share(),
    )
