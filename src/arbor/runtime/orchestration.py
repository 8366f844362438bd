from __future__ import annotations

import random
from dataclasses import dataclass, field

from arbor.errors import ConfigurationError
from arbor.lsystem.presets import (DEFAULT_ROOT_PRESET, DEFAULT_TREE_PRESET,
                                   root_preset, tree_preset)
from arbor.lsystem.rules import DEFAULT_AXIOM, Operator, RuleSet
from arbor.settings import GrowthSettings
from arbor.turtle.boundary import GroundClamp
from arbor.turtle.events import (BranchEvent, EventKind, EventRecorder,
                                 GrowthCallback, LeafEvent, RootEvent,
                                 RotateEvent)
from arbor.turtle.interpreter import PassResult, interpret
from arbor.turtle.state import Pose, StateStack, TurtleState
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TREE_ITERATIONS = 3
DEFAULT_INITIAL_LENGTH = 1.0
DEFAULT_SEED = 1


@dataclass(frozen=True)
class GrowthConfig:
    trunk_rules: RuleSet = field(default_factory=tree_preset)
    root_rules: RuleSet = field(default_factory=root_preset)
    tree_iterations: int = DEFAULT_TREE_ITERATIONS
    initial_length: float = DEFAULT_INITIAL_LENGTH
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        if isinstance(self.tree_iterations, bool) or not isinstance(
            self.tree_iterations, int
        ):
            raise ConfigurationError("tree_iterations must be an integer")
        if self.tree_iterations < 0:
            raise ConfigurationError("tree_iterations must be >= 0")
        if not 0.0 < self.initial_length <= 1.0:
            raise ConfigurationError("initial_length must be in (0, 1]")
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ConfigurationError("seed must be an integer")

    @property
    def axiom(self) -> str:
        return self.trunk_rules.axiom

    @classmethod
    def from_presets(
        cls,
        tree_index: int = DEFAULT_TREE_PRESET,
        root_index: int = DEFAULT_ROOT_PRESET,
        *,
        axiom: str = DEFAULT_AXIOM,
        tree_iterations: int = DEFAULT_TREE_ITERATIONS,
        initial_length: float = DEFAULT_INITIAL_LENGTH,
        seed: int = DEFAULT_SEED,
    ) -> GrowthConfig:
        return cls(
            trunk_rules=tree_preset(tree_index, axiom=axiom),
            root_rules=root_preset(root_index, axiom=axiom),
            tree_iterations=tree_iterations,
            initial_length=initial_length,
            seed=seed,
        )

    def root_iterations(self, settings: GrowthSettings) -> int:
        return min(self.tree_iterations, settings.root_iteration_cap)


@dataclass(frozen=True)
class GrowthResult:
    trunk_sequence: str
    root_sequence: str
    trunk_pass: PassResult
    root_pass: PassResult
    branches: tuple[BranchEvent, ...]
    leaves: tuple[LeafEvent, ...]
    roots: tuple[RootEvent, ...]
    rotations: tuple[RotateEvent, ...]


def _origin_pose(settings: GrowthSettings) -> Pose:
    return Pose(position=settings.origin, orientation=settings.initial_orientation)


def _root_state(config: GrowthConfig, settings: GrowthSettings) -> TurtleState:
    # The trunk prefix grows before any push, so the first level starts one
    # length decrement short. Both widths keep the initial value.
    return TurtleState(
        pose=_origin_pose(settings),
        width_start=settings.segment_initial_width,
        width_end=settings.segment_initial_width,
        length=config.initial_length - settings.segment_length_decrement,
    )


def _run_pass(
    sequence: str,
    config: GrowthConfig,
    rules: RuleSet,
    rng: random.Random,
    recorder: EventRecorder,
    settings: GrowthSettings,
) -> PassResult:
    stack = StateStack(_root_state(config, settings))
    return interpret(
        sequence,
        stack,
        rng,
        GroundClamp(settings.ground_height),
        recorder,
        pose=_origin_pose(settings),
        settings=settings,
        inert_symbols={rules.axiom, *rules.productions},
    )


def rebuild(
    config: GrowthConfig,
    callback: GrowthCallback | None = None,
    *,
    settings: GrowthSettings | None = None,
) -> GrowthResult:
    """Grow the trunk and then the roots described by ``config``.

    Events reach ``callback`` as they are emitted. If either pass raises, the
    events already delivered are a partial result the caller should discard.
    """

    settings = settings or GrowthSettings.from_environment()
    if config.tree_iterations > settings.max_iterations:
        raise ConfigurationError(
            f"tree_iterations must be at most {settings.max_iterations}, "
            f"got {config.tree_iterations}"
        )

    rng = random.Random(config.seed)

    trunk_recorder = EventRecorder(callback)
    trunk_sequence = Operator.BRANCH.value * settings.trunk_prefix_length + (
        config.trunk_rules.derive(config.tree_iterations)
    )
    trunk_pass = _run_pass(
        trunk_sequence, config, config.trunk_rules, rng, trunk_recorder, settings
    )

    root_recorder = EventRecorder(callback)
    root_sequence = config.root_rules.derive(config.root_iterations(settings))
    root_pass = _run_pass(
        root_sequence, config, config.root_rules, rng, root_recorder, settings
    )

    result = GrowthResult(
        trunk_sequence=trunk_sequence,
        root_sequence=root_sequence,
        trunk_pass=trunk_pass,
        root_pass=root_pass,
        branches=trunk_recorder.of_kind(EventKind.BRANCH),
        leaves=trunk_recorder.of_kind(EventKind.LEAF),
        roots=root_recorder.of_kind(EventKind.ROOT),
        rotations=trunk_recorder.of_kind(EventKind.ROTATE)
        + root_recorder.of_kind(EventKind.ROTATE),
    )
    logger.info(
        "Rebuilt structure (seed=%d, iterations=%d): %d branches, %d leaves, %d roots",
        config.seed,
        config.tree_iterations,
        len(result.branches),
        len(result.leaves),
        len(result.roots),
    )
    return result
