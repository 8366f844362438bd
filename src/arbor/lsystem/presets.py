from arbor.errors import ConfigurationError
from arbor.lsystem.rules import DEFAULT_AXIOM, RuleSet

TREE_PRESETS: tuple[str, ...] = (
    "F[*X[FL]]F[*X[FL]]*X",
    "F[[X[F]]*X[F]]*F[*FX[FL]]*X",
    "F[*X][*X]",
    "F[*X[FL]][*X[FL]]",
)

ROOT_PRESETS: tuple[str, ...] = (
    "R[*X][*X]*R*[X]",
    "R[*X]*[*RX]*R*X",
)

DEFAULT_TREE_PRESET = 3
DEFAULT_ROOT_PRESET = 0


def _select(catalog: tuple[str, ...], index: int, name: str) -> str:
    if not 0 <= index < len(catalog):
        raise ConfigurationError(
            f"{name} preset index must be between 0 and {len(catalog) - 1}, got {index}"
        )
    return catalog[index]


def tree_preset(index: int = DEFAULT_TREE_PRESET, *, axiom: str = DEFAULT_AXIOM) -> RuleSet:
    return RuleSet.single(_select(TREE_PRESETS, index, "tree"), axiom=axiom)


def root_preset(index: int = DEFAULT_ROOT_PRESET, *, axiom: str = DEFAULT_AXIOM) -> RuleSet:
    return RuleSet.single(_select(ROOT_PRESETS, index, "root"), axiom=axiom)
