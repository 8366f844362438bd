from arbor.utilities.env.parsing import _env_float

DEFAULT_GROUND_HEIGHT = -1.0
DEFAULT_SEGMENT_INITIAL_WIDTH = 0.1
DEFAULT_SEGMENT_WIDTH_DECREMENT = 0.03
DEFAULT_SEGMENT_LENGTH_DECREMENT = 0.01
DEFAULT_MIN_TURN_DEGREES = 10.0
DEFAULT_MAX_TURN_DEGREES = 35.0


class TurtleConfiguration:
    @classmethod
    def ground_height(cls) -> float:
        return _env_float("ARBOR_GROUND_HEIGHT", default=DEFAULT_GROUND_HEIGHT)

    @classmethod
    def segment_initial_width(cls) -> float:
        return _env_float(
            "ARBOR_SEGMENT_INITIAL_WIDTH",
            default=DEFAULT_SEGMENT_INITIAL_WIDTH,
            minimum=0.0,
        )

    @classmethod
    def segment_width_decrement(cls) -> float:
        return _env_float(
            "ARBOR_SEGMENT_WIDTH_DECREMENT",
            default=DEFAULT_SEGMENT_WIDTH_DECREMENT,
            minimum=0.0,
        )

    @classmethod
    def segment_length_decrement(cls) -> float:
        return _env_float(
            "ARBOR_SEGMENT_LENGTH_DECREMENT",
            default=DEFAULT_SEGMENT_LENGTH_DECREMENT,
            minimum=0.0,
        )

    @classmethod
    def turn_range_degrees(cls) -> tuple[float, float]:
        minimum = _env_float(
            "ARBOR_MIN_TURN_DEGREES",
            default=DEFAULT_MIN_TURN_DEGREES,
            minimum=0.0,
            maximum=360.0,
        )
        maximum = _env_float(
            "ARBOR_MAX_TURN_DEGREES",
            default=DEFAULT_MAX_TURN_DEGREES,
            minimum=0.0,
            maximum=360.0,
        )
        if maximum < minimum:
            raise ValueError(
                "ARBOR_MAX_TURN_DEGREES must be at least ARBOR_MIN_TURN_DEGREES"
            )
        return minimum, maximum
