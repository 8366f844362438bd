from __future__ import annotations

from dataclasses import dataclass, replace

from arbor.errors import UnbalancedBracketsError
from arbor.geometry import Rotation, Vector3


@dataclass(frozen=True, slots=True)
class Pose:
    position: Vector3
    orientation: Rotation

    def advanced(self, local_axis: Vector3, distance: float) -> Pose:
        """Move ``distance`` along ``local_axis`` of the current orientation."""

        step = self.orientation.apply(local_axis).scaled(distance)
        return Pose(position=self.position + step, orientation=self.orientation)

    def turned(self, local_axis: Vector3, degrees: float) -> Pose:
        return Pose(
            position=self.position,
            orientation=self.orientation.rotated_locally(local_axis, degrees),
        )


@dataclass(frozen=True, slots=True)
class TurtleState:
    pose: Pose
    width_start: float
    width_end: float
    length: float

    def child(self, *, width_decrement: float, length_decrement: float) -> TurtleState:
        """Return the state for one deeper bracket level.

        The child starts where the parent segment ends and thins from there.
        """

        return TurtleState(
            pose=self.pose,
            width_start=self.width_end,
            width_end=self.width_start - width_decrement,
            length=self.length - length_decrement,
        )


class StateStack:
    """LIFO of turtle states that never gives up its root entry."""

    def __init__(self, root: TurtleState) -> None:
        self._states: list[TurtleState] = [root]

    @property
    def top(self) -> TurtleState:
        return self._states[-1]

    @property
    def root(self) -> TurtleState:
        return self._states[0]

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self):
        return iter(tuple(self._states))

    def push(
        self, pose: Pose, *, width_decrement: float, length_decrement: float
    ) -> TurtleState:
        """Record ``pose`` on the current entry and push its decayed child."""

        parent = replace(self.top, pose=pose)
        self._states[-1] = parent
        child = parent.child(
            width_decrement=width_decrement, length_decrement=length_decrement
        )
        self._states.append(child)
        return child

    def pop(self, *, symbol: str = "]", index: int = -1) -> TurtleState:
        """Drop the top entry and return the entry that becomes the new top."""

        if len(self._states) <= 1:
            raise UnbalancedBracketsError(
                f"Unbalanced {symbol!r} at position {index}: cannot pop the root state",
                symbol=symbol,
                index=index,
            )
        self._states.pop()
        return self._states[-1]
