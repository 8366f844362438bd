from arbor.lsystem.derivation import derive  # noqa: F401
from arbor.lsystem.derivation import iter_derivations  # noqa: F401
from arbor.lsystem.presets import (ROOT_PRESETS, TREE_PRESETS,  # noqa: F401
                                   root_preset, tree_preset)
from arbor.lsystem.rules import Operator, RuleSet  # noqa: F401
from arbor.lsystem.rules import validate_ruleset  # noqa: F401
