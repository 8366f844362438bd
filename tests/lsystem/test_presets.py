from __future__ import annotations

import pytest

from arbor.errors import ConfigurationError
from arbor.lsystem.presets import (ROOT_PRESETS, TREE_PRESETS, root_preset,
                                   tree_preset)
from arbor.lsystem.rules import validate_ruleset


class TestPresets:
    """Keep the bundled catalogs usable as drop-in defaults."""

    @pytest.mark.parametrize("index", range(len(TREE_PRESETS)))
    def test_tree_presets_validate(self, index: int) -> None:
        """Ensure every tree preset passes pre-validation."""
        rules = tree_preset(index)

        validate_ruleset(rules)
        assert rules.productions == {"X": TREE_PRESETS[index]}

    @pytest.mark.parametrize("index", range(len(ROOT_PRESETS)))
    def test_root_presets_validate(self, index: int) -> None:
        """Ensure every root preset passes pre-validation."""
        validate_ruleset(root_preset(index))

    def test_default_presets(self) -> None:
        """Pin the defaults selected when no index is given."""
        assert tree_preset().productions["X"] == "F[*X[FL]][*X[FL]]"
        assert root_preset().productions["X"] == "R[*X][*X]*R*[X]"

    @pytest.mark.parametrize("index", [-1, len(TREE_PRESETS)])
    def test_out_of_range_index_is_rejected(self, index: int) -> None:
        """Reject indexes outside the catalog instead of wrapping around."""
        with pytest.raises(ConfigurationError):
            tree_preset(index)
