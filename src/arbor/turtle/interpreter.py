from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from arbor.errors import InterpretationError, UnrecognizedSymbolError
from arbor.geometry import BACK, DOWN, FORWARD, LEFT, RIGHT, UP, Vector3
from arbor.lsystem.rules import DEFAULT_AXIOM, Operator
from arbor.settings import GrowthSettings
from arbor.turtle.boundary import BoundaryPolicy
from arbor.turtle.events import (BranchEvent, GrowthCallback, LeafEvent,
                                 RootEvent, RotateEvent, TurnAxis)
from arbor.turtle.state import Pose, StateStack
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

# Index order matters: ``rng.randrange(4)`` picks from this tuple.
TURN_AXES: tuple[tuple[TurnAxis, Vector3], ...] = (
    (TurnAxis.FORWARD, FORWARD),
    (TurnAxis.BACK, BACK),
    (TurnAxis.LEFT, LEFT),
    (TurnAxis.RIGHT, RIGHT),
)


class GrowthMode(StrEnum):
    IDLE = "idle"
    TREE = "tree"
    ROOT = "root"


@dataclass(frozen=True)
class PassResult:
    pose: Pose
    depth: int
    mode: GrowthMode
    branch_count: int = 0
    root_count: int = 0
    leaf_count: int = 0
    rotate_count: int = 0


class TurtleInterpreter:
    """Walk a derived sequence once and emit growth events for it.

    The pose is threaded through the loop as a value; only the stack and the
    random source are shared with the caller.
    """

    def __init__(
        self,
        *,
        stack: StateStack,
        rng: random.Random,
        boundary: BoundaryPolicy,
        callback: GrowthCallback,
        settings: GrowthSettings,
        inert_symbols: Iterable[str] = (DEFAULT_AXIOM,),
    ) -> None:
        self._stack = stack
        self._rng = rng
        self._boundary = boundary
        self._callback = callback
        self._settings = settings
        self._inert_symbols = frozenset(inert_symbols)

        self._mode = GrowthMode.IDLE
        self._branch_count = 0
        self._root_count = 0
        self._leaf_count = 0
        self._rotate_count = 0

    def run(self, sequence: str, pose: Pose) -> PassResult:
        try:
            for index, symbol in enumerate(sequence):
                pose = self._step(symbol, index, pose)
        except InterpretationError as error:
            logger.error(
                "Interpretation aborted at position %d (%r): %s",
                error.index,
                error.symbol,
                error,
            )
            raise

        depth = len(self._stack)
        if depth != 1:
            logger.warning(
                "Sequence left %d unmatched '[' on the state stack", depth - 1
            )
        return PassResult(
            pose=pose,
            depth=depth,
            mode=self._mode,
            branch_count=self._branch_count,
            root_count=self._root_count,
            leaf_count=self._leaf_count,
            rotate_count=self._rotate_count,
        )

    def _step(self, symbol: str, index: int, pose: Pose) -> Pose:
        if symbol == Operator.BRANCH:
            return self._grow_branch(pose)
        if symbol == Operator.ROOT:
            return self._grow_root(pose)
        if symbol == Operator.LEAF:
            self._grow_leaf(pose)
            return pose
        if symbol == Operator.TURN:
            return self._turn(pose)
        if symbol == Operator.PUSH:
            self._stack.push(
                pose,
                width_decrement=self._settings.segment_width_decrement,
                length_decrement=self._settings.segment_length_decrement,
            )
            return pose
        if symbol == Operator.POP:
            return self._stack.pop(symbol=symbol, index=index).pose
        if symbol in self._inert_symbols:
            return pose
        raise UnrecognizedSymbolError(
            f"Unrecognized symbol {symbol!r} at position {index}",
            symbol=symbol,
            index=index,
        )

    def _grow_branch(self, pose: Pose) -> Pose:
        state = self._stack.top
        moved = pose.advanced(UP, state.length)
        self._callback.on_branch(
            BranchEvent(
                start=pose.position,
                end=moved.position,
                width_start=state.width_start,
                width_end=state.width_end,
                orientation=pose.orientation,
                index=self._branch_count,
            )
        )
        self._branch_count += 1
        self._mode = GrowthMode.TREE
        return moved

    def _grow_root(self, pose: Pose) -> Pose:
        state = self._stack.top
        moved = pose.advanced(DOWN, state.length)
        start, end = self._boundary.constrain(
            pose.position, moved.position, first_segment=self._root_count == 0
        )
        self._callback.on_root(
            RootEvent(
                start=start,
                end=end,
                width_start=state.width_start,
                width_end=state.width_end,
                orientation=pose.orientation,
                index=self._root_count,
            )
        )
        self._root_count += 1
        self._mode = GrowthMode.ROOT
        return moved

    def _grow_leaf(self, pose: Pose) -> None:
        branch_index = self._branch_count - 1 if self._branch_count else None
        self._callback.on_leaf(
            LeafEvent(
                position=pose.position,
                orientation=pose.orientation,
                branch_index=branch_index,
            )
        )
        self._leaf_count += 1

    def _turn(self, pose: Pose) -> Pose:
        axis_name, axis = TURN_AXES[self._rng.randrange(len(TURN_AXES))]
        angle = self._rng.uniform(
            self._settings.min_turn_degrees, self._settings.max_turn_degrees
        )
        turned = pose.turned(axis, angle)
        self._callback.on_rotate(
            RotateEvent(
                axis=axis_name,
                angle_degrees=angle,
                orientation=turned.orientation,
            )
        )
        self._rotate_count += 1
        return turned


def interpret(
    sequence: str,
    stack: StateStack,
    rng: random.Random,
    boundary: BoundaryPolicy,
    callback: GrowthCallback,
    *,
    pose: Pose | None = None,
    settings: GrowthSettings | None = None,
    inert_symbols: Iterable[str] = (DEFAULT_AXIOM,),
) -> PassResult:
    """Interpret ``sequence`` starting from ``pose`` (the root state's pose by default)."""

    interpreter = TurtleInterpreter(
        stack=stack,
        rng=rng,
        boundary=boundary,
        callback=callback,
        settings=settings or GrowthSettings(),
        inert_symbols=inert_symbols,
    )
    return interpreter.run(sequence, stack.root.pose if pose is None else pose)
