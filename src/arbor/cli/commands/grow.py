import json
from dataclasses import asdict, replace
from typing import Annotated, Any

import typer

from arbor.errors import ArborError
from arbor.lsystem.presets import DEFAULT_ROOT_PRESET, DEFAULT_TREE_PRESET
from arbor.lsystem.rules import RuleSet, validate_ruleset
from arbor.runtime.orchestration import (DEFAULT_INITIAL_LENGTH,
                                         DEFAULT_SEED,
                                         DEFAULT_TREE_ITERATIONS,
                                         GrowthConfig, GrowthResult, rebuild)
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def _build_config(
    *,
    seed: int,
    iterations: int,
    initial_length: float,
    tree_preset: int,
    root_preset: int,
    tree_rules: str | None,
    root_rules: str | None,
) -> GrowthConfig:
    config = GrowthConfig.from_presets(
        tree_preset,
        root_preset,
        tree_iterations=iterations,
        initial_length=initial_length,
        seed=seed,
    )
    if tree_rules is not None:
        config = replace(config, trunk_rules=RuleSet.single(tree_rules))
    if root_rules is not None:
        config = replace(config, root_rules=RuleSet.single(root_rules))
    return config


def _summary(result: GrowthResult) -> dict[str, Any]:
    return {
        "trunk_symbols": len(result.trunk_sequence),
        "root_symbols": len(result.root_sequence),
        "branches": len(result.branches),
        "leaves": len(result.leaves),
        "roots": len(result.roots),
        "rotations": len(result.rotations),
        "trunk_depth": result.trunk_pass.depth,
        "root_depth": result.root_pass.depth,
    }


def _events(result: GrowthResult) -> dict[str, Any]:
    return {
        "branches": [asdict(event) for event in result.branches],
        "leaves": [asdict(event) for event in result.leaves],
        "roots": [asdict(event) for event in result.roots],
    }


def grow_command(
    seed: Annotated[int, typer.Option("--seed")] = DEFAULT_SEED,
    iterations: Annotated[int, typer.Option("--iterations")] = DEFAULT_TREE_ITERATIONS,
    initial_length: Annotated[
        float, typer.Option("--initial-length")
    ] = DEFAULT_INITIAL_LENGTH,
    tree_preset: Annotated[int, typer.Option("--tree-preset")] = DEFAULT_TREE_PRESET,
    root_preset: Annotated[int, typer.Option("--root-preset")] = DEFAULT_ROOT_PRESET,
    tree_rules: Annotated[
        str | None,
        typer.Option("--tree-rules", help="Replacement for the axiom in the trunk pass"),
    ] = None,
    root_rules: Annotated[
        str | None,
        typer.Option("--root-rules", help="Replacement for the axiom in the root pass"),
    ] = None,
    events: bool = typer.Option(
        False,
        "--events",
        help="Include every branch, leaf and root segment in the output",
    ),
) -> None:
    try:
        config = _build_config(
            seed=seed,
            iterations=iterations,
            initial_length=initial_length,
            tree_preset=tree_preset,
            root_preset=root_preset,
            tree_rules=tree_rules,
            root_rules=root_rules,
        )
        validate_ruleset(config.trunk_rules)
        validate_ruleset(config.root_rules)
        result = rebuild(config)
    except ArborError as error:
        logger.error("Growth failed: %s", error)
        raise typer.Exit(code=1) from error

    payload = _summary(result)
    if events:
        payload["events"] = _events(result)
    typer.echo(json.dumps(payload, indent=2))
