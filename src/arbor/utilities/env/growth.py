from arbor.utilities.env.parsing import _env_int

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_ROOT_ITERATION_CAP = 4
DEFAULT_TRUNK_PREFIX_LENGTH = 2


class GrowthConfiguration:
    @classmethod
    def max_iterations(cls) -> int:
        return _env_int(
            "ARBOR_MAX_ITERATIONS", default=DEFAULT_MAX_ITERATIONS, minimum=0
        )

    @classmethod
    def root_iteration_cap(cls) -> int:
        return _env_int(
            "ARBOR_ROOT_ITERATION_CAP", default=DEFAULT_ROOT_ITERATION_CAP, minimum=0
        )

    @classmethod
    def trunk_prefix_length(cls) -> int:
        return _env_int(
            "ARBOR_TRUNK_PREFIX_LENGTH", default=DEFAULT_TRUNK_PREFIX_LENGTH, minimum=0
        )
