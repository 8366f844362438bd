from arbor.errors import (ArborError, ConfigurationError,  # noqa: F401
                          UnbalancedBracketsError, UnrecognizedSymbolError)
from arbor.lsystem import RuleSet, derive  # noqa: F401
from arbor.runtime import GrowthConfig, GrowthResult, rebuild  # noqa: F401
from arbor.settings import GrowthSettings  # noqa: F401
