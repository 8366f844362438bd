from arbor.runtime.orchestration import (GrowthConfig,  # noqa: F401
                                         GrowthResult, rebuild)
