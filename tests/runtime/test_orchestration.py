from __future__ import annotations

import pytest

from arbor.errors import (ConfigurationError, UnbalancedBracketsError,
                          UnrecognizedSymbolError)
from arbor.lsystem.presets import root_preset, tree_preset
from arbor.lsystem.rules import RuleSet, validate_ruleset
from arbor.runtime.orchestration import GrowthConfig, rebuild
from arbor.settings import ORIGIN, GrowthSettings
from arbor.turtle.events import EventKind, EventRecorder


class TestGrowthConfig:
    """Validate configuration bounds before any growth happens."""

    def test_defaults_use_catalog_presets(self) -> None:
        """Ensure the default config grows the default tree and root presets."""
        config = GrowthConfig()

        assert config.trunk_rules == tree_preset()
        assert config.root_rules == root_preset()
        assert config.axiom == "X"

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"tree_iterations": -1}, id="negative_iterations"),
            pytest.param({"tree_iterations": 2.5}, id="fractional_iterations"),
            pytest.param({"initial_length": 0.0}, id="zero_length"),
            pytest.param({"initial_length": 1.5}, id="long_length"),
            pytest.param({"seed": "seven"}, id="string_seed"),
        ],
    )
    def test_invalid_values_are_rejected(self, kwargs: dict[str, object]) -> None:
        """Reject out-of-range values so bad configs never reach the turtle."""
        with pytest.raises(ConfigurationError):
            GrowthConfig(**kwargs)  # type: ignore[arg-type]

    def test_root_iterations_are_capped(self) -> None:
        """Check the root pass uses the smaller of tree iterations and the cap."""
        settings = GrowthSettings(root_iteration_cap=4)

        assert GrowthConfig(tree_iterations=6).root_iterations(settings) == 4
        assert GrowthConfig(tree_iterations=2).root_iterations(settings) == 2


class TestRebuild:
    """Validate the two-pass trunk then roots orchestration."""

    def test_trunk_sequence_has_growth_prefix(self) -> None:
        """Ensure the trunk pass starts with the stand-off prefix."""
        config = GrowthConfig(tree_iterations=2)

        result = rebuild(config, settings=GrowthSettings())

        assert result.trunk_sequence == "FF" + config.trunk_rules.derive(2)

    def test_prefix_length_is_configurable(self) -> None:
        """Verify the prefix follows the configured length."""
        config = GrowthConfig(tree_iterations=1)

        result = rebuild(config, settings=GrowthSettings(trunk_prefix_length=0))

        assert result.trunk_sequence == config.trunk_rules.derive(1)

    def test_root_sequence_uses_capped_iterations(self) -> None:
        """Confirm the root pass derives with min(tree iterations, cap)."""
        config = GrowthConfig(tree_iterations=6)

        result = rebuild(config, settings=GrowthSettings(root_iteration_cap=2))

        assert result.root_sequence == config.root_rules.derive(2)

    def test_first_branch_starts_at_origin(self) -> None:
        """Check the trunk grows from the origin with one decrement taken off."""
        result = rebuild(GrowthConfig(initial_length=0.5), settings=GrowthSettings())

        first = result.branches[0]
        assert first.start == ORIGIN
        assert first.end.y == pytest.approx(0.49)
        assert first.width_start == pytest.approx(0.1)
        assert first.width_end == pytest.approx(0.1)

    def test_root_pass_starts_from_a_fresh_origin(self) -> None:
        """Ensure the root pass does not inherit the trunk's final pose or stack."""
        result = rebuild(GrowthConfig(), settings=GrowthSettings())

        assert result.roots[0].start == ORIGIN
        assert result.root_pass.depth == 1
        assert result.trunk_pass.depth == 1

    def test_roots_stay_underground(self) -> None:
        """Verify every root endpoint other than the anchor sits at or below ground."""
        settings = GrowthSettings()
        result = rebuild(GrowthConfig(tree_iterations=4), settings=settings)

        assert result.roots
        for event in result.roots[1:]:
            assert event.start.y <= settings.ground_height
        for event in result.roots:
            assert event.end.y <= settings.ground_height

    def test_leaves_reference_emitted_branches(self) -> None:
        """Check every leaf points at a branch the caller has already seen."""
        result = rebuild(GrowthConfig(tree_iterations=3), settings=GrowthSettings())

        assert result.leaves
        for leaf in result.leaves:
            assert leaf.branch_index is not None
            assert 0 <= leaf.branch_index < len(result.branches)

    def test_callback_receives_events_in_emission_order(self) -> None:
        """Ensure the caller sees every collected event, trunk first."""
        recorder = EventRecorder()

        result = rebuild(GrowthConfig(), recorder, settings=GrowthSettings())

        branches = recorder.of_kind(EventKind.BRANCH)
        roots = recorder.of_kind(EventKind.ROOT)
        assert branches == result.branches
        assert roots == result.roots
        assert recorder.events.index(roots[0]) > recorder.events.index(branches[-1])

    def test_same_seed_reproduces_structure(self) -> None:
        """Confirm identical seeds and configs rebuild identical geometry."""
        config = GrowthConfig(tree_iterations=4, seed=11)

        first = rebuild(config, settings=GrowthSettings())
        second = rebuild(config, settings=GrowthSettings())

        assert first == second

    def test_different_seeds_change_rotations(self) -> None:
        """Check the seed actually drives the random turns."""
        first = rebuild(GrowthConfig(seed=1), settings=GrowthSettings())
        second = rebuild(GrowthConfig(seed=2), settings=GrowthSettings())

        assert first.rotations != second.rotations

    def test_iterations_above_ceiling_are_rejected(self) -> None:
        """Bound derivation growth with the configured iteration ceiling."""
        with pytest.raises(ConfigurationError):
            rebuild(GrowthConfig(tree_iterations=5), settings=GrowthSettings(max_iterations=4))

    def test_validated_rules_with_extra_nonterminals_grow(self) -> None:
        """Ensure a grammar accepted by pre-validation also interprets cleanly."""
        trunk = RuleSet(axiom="X", productions={"X": "FY", "Y": "[F]"})
        validate_ruleset(trunk)

        result = rebuild(
            GrowthConfig(trunk_rules=trunk, tree_iterations=1), settings=GrowthSettings()
        )

        assert result.trunk_sequence == "FFFY"
        assert len(result.branches) == 3

    def test_operator_rule_keys_still_grow(self) -> None:
        """Check a production keyed on an operator keeps that operator active."""
        trunk = RuleSet(axiom="X", productions={"X": "F", "F": "FF"})

        result = rebuild(
            GrowthConfig(trunk_rules=trunk, tree_iterations=2), settings=GrowthSettings()
        )

        assert len(result.branches) == len(result.trunk_sequence)

    def test_unbalanced_rules_abort(self) -> None:
        """Surface unbalanced grammars as a fatal error from the trunk pass."""
        config = GrowthConfig(trunk_rules=RuleSet.single("F]"), tree_iterations=1)

        with pytest.raises(UnbalancedBracketsError):
            rebuild(config, settings=GrowthSettings())

    def test_unknown_symbols_abort(self) -> None:
        """Surface unknown symbols from the root pass as a fatal error."""
        config = GrowthConfig(root_rules=RuleSet.single("RQ"), tree_iterations=1)

        with pytest.raises(UnrecognizedSymbolError):
            rebuild(config, settings=GrowthSettings())

    def test_settings_default_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify env overrides apply when no explicit settings are passed."""
        monkeypatch.setenv("ARBOR_ROOT_ITERATION_CAP", "1")
        config = GrowthConfig(tree_iterations=3)

        result = rebuild(config)

        assert result.root_sequence == config.root_rules.derive(1)
