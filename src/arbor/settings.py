from __future__ import annotations

from dataclasses import dataclass

from arbor.geometry import Rotation, Vector3
from arbor.utilities.env import Configuration
from arbor.utilities.env.growth import (DEFAULT_MAX_ITERATIONS,
                                        DEFAULT_ROOT_ITERATION_CAP,
                                        DEFAULT_TRUNK_PREFIX_LENGTH)
from arbor.utilities.env.turtle import (DEFAULT_GROUND_HEIGHT,
                                        DEFAULT_MAX_TURN_DEGREES,
                                        DEFAULT_MIN_TURN_DEGREES,
                                        DEFAULT_SEGMENT_INITIAL_WIDTH,
                                        DEFAULT_SEGMENT_LENGTH_DECREMENT,
                                        DEFAULT_SEGMENT_WIDTH_DECREMENT)

ORIGIN = Vector3(0.0, 0.0, 10.0)
INITIAL_ORIENTATION = Rotation.identity()


@dataclass(frozen=True)
class GrowthSettings:
    """Numeric constants shared by the derivation, turtle and orchestration."""

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    root_iteration_cap: int = DEFAULT_ROOT_ITERATION_CAP
    trunk_prefix_length: int = DEFAULT_TRUNK_PREFIX_LENGTH
    ground_height: float = DEFAULT_GROUND_HEIGHT
    segment_initial_width: float = DEFAULT_SEGMENT_INITIAL_WIDTH
    segment_width_decrement: float = DEFAULT_SEGMENT_WIDTH_DECREMENT
    segment_length_decrement: float = DEFAULT_SEGMENT_LENGTH_DECREMENT
    min_turn_degrees: float = DEFAULT_MIN_TURN_DEGREES
    max_turn_degrees: float = DEFAULT_MAX_TURN_DEGREES
    origin: Vector3 = ORIGIN
    initial_orientation: Rotation = INITIAL_ORIENTATION

    @classmethod
    def from_environment(cls) -> GrowthSettings:
        min_turn, max_turn = Configuration.turn_range_degrees()
        return cls(
            max_iterations=Configuration.max_iterations(),
            root_iteration_cap=Configuration.root_iteration_cap(),
            trunk_prefix_length=Configuration.trunk_prefix_length(),
            ground_height=Configuration.ground_height(),
            segment_initial_width=Configuration.segment_initial_width(),
            segment_width_decrement=Configuration.segment_width_decrement(),
            segment_length_decrement=Configuration.segment_length_decrement(),
            min_turn_degrees=min_turn,
            max_turn_degrees=max_turn,
        )
