from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol, Union

from arbor.geometry import Rotation, Vector3


class EventKind(StrEnum):
    BRANCH = "branch"
    ROOT = "root"
    LEAF = "leaf"
    ROTATE = "rotate"


class TurnAxis(StrEnum):
    FORWARD = "forward"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class BranchEvent:
    start: Vector3
    end: Vector3
    width_start: float
    width_end: float
    orientation: Rotation
    index: int
    kind: EventKind = field(default=EventKind.BRANCH, init=False)


@dataclass(frozen=True, slots=True)
class RootEvent:
    start: Vector3
    end: Vector3
    width_start: float
    width_end: float
    orientation: Rotation
    index: int
    kind: EventKind = field(default=EventKind.ROOT, init=False)


@dataclass(frozen=True, slots=True)
class LeafEvent:
    """A leaf anchored at ``position``.

    ``branch_index`` names the branch the renderer should parent it under.
    """

    position: Vector3
    orientation: Rotation
    branch_index: int | None
    kind: EventKind = field(default=EventKind.LEAF, init=False)


@dataclass(frozen=True, slots=True)
class RotateEvent:
    axis: TurnAxis
    angle_degrees: float
    orientation: Rotation
    kind: EventKind = field(default=EventKind.ROTATE, init=False)


GrowthEvent = Union[BranchEvent, RootEvent, LeafEvent, RotateEvent]


class GrowthCallback(Protocol):
    """Receiver for growth events, invoked synchronously in emission order."""

    def on_branch(self, event: BranchEvent) -> None: ...

    def on_root(self, event: RootEvent) -> None: ...

    def on_leaf(self, event: LeafEvent) -> None: ...

    def on_rotate(self, event: RotateEvent) -> None: ...


class NullCallback:
    def on_branch(self, event: BranchEvent) -> None:
        pass

    def on_root(self, event: RootEvent) -> None:
        pass

    def on_leaf(self, event: LeafEvent) -> None:
        pass

    def on_rotate(self, event: RotateEvent) -> None:
        pass


def dispatch(callback: GrowthCallback, event: GrowthEvent) -> None:
    """Route ``event`` to the callback method for its kind."""

    if isinstance(event, BranchEvent):
        callback.on_branch(event)
    elif isinstance(event, RootEvent):
        callback.on_root(event)
    elif isinstance(event, LeafEvent):
        callback.on_leaf(event)
    elif isinstance(event, RotateEvent):
        callback.on_rotate(event)
    else:
        raise TypeError(f"Unsupported growth event: {event!r}")


class EventRecorder:
    """Keep every event it sees and forward it to an optional downstream callback."""

    def __init__(self, downstream: GrowthCallback | None = None) -> None:
        self._downstream = downstream
        self.events: list[GrowthEvent] = []

    def _record(self, event: GrowthEvent) -> None:
        self.events.append(event)
        if self._downstream is not None:
            dispatch(self._downstream, event)

    def on_branch(self, event: BranchEvent) -> None:
        self._record(event)

    def on_root(self, event: RootEvent) -> None:
        self._record(event)

    def on_leaf(self, event: LeafEvent) -> None:
        self._record(event)

    def on_rotate(self, event: RotateEvent) -> None:
        self._record(event)

    def of_kind(self, kind: EventKind) -> tuple[GrowthEvent, ...]:
        return tuple(event for event in self.events if event.kind == kind)
