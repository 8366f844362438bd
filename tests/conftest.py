import os
import tempfile

import pytest
from hypothesis import HealthCheck, settings

# Keep rolling log files out of the home directory if a test turns them on.
os.environ.setdefault("ARBOR_LOG_DIR", tempfile.mkdtemp(prefix="arbor-logs-"))

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")

_ARBOR_ENV_VARS = (
    "ARBOR_MAX_ITERATIONS",
    "ARBOR_ROOT_ITERATION_CAP",
    "ARBOR_TRUNK_PREFIX_LENGTH",
    "ARBOR_GROUND_HEIGHT",
    "ARBOR_SEGMENT_INITIAL_WIDTH",
    "ARBOR_SEGMENT_WIDTH_DECREMENT",
    "ARBOR_SEGMENT_LENGTH_DECREMENT",
    "ARBOR_MIN_TURN_DEGREES",
    "ARBOR_MAX_TURN_DEGREES",
)


@pytest.fixture(autouse=True)
def clean_growth_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop growth overrides from the environment so defaults apply per test."""

    for name in _ARBOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
