from __future__ import annotations

import json

from typer.testing import CliRunner

from arbor.app import app

runner = CliRunner()


class TestGrowCommand:
    """Exercise the grow command end to end."""

    def test_grow_prints_summary(self) -> None:
        """Ensure a default run reports branch, leaf and root counts."""
        result = runner.invoke(app, ["grow", "--seed", "3", "--iterations", "2"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["branches"] > 0
        assert payload["roots"] > 0
        assert payload["trunk_depth"] == 1
        assert "events" not in payload

    def test_grow_can_dump_events(self) -> None:
        """Verify --events includes serialisable geometry for every segment."""
        result = runner.invoke(app, ["grow", "--iterations", "1", "--events"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        first_branch = payload["events"]["branches"][0]
        assert first_branch["kind"] == "branch"
        assert first_branch["start"] == {"x": 0.0, "y": 0.0, "z": 10.0}

    def test_custom_rules_replace_presets(self) -> None:
        """Check custom trunk rules are grown instead of the preset."""
        result = runner.invoke(
            app, ["grow", "--iterations", "1", "--tree-rules", "F[F]F", "--root-rules", "R"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["branches"] == 5
        assert payload["leaves"] == 0
        assert payload["roots"] == 1

    def test_invalid_rules_exit_with_error(self) -> None:
        """Ensure malformed grammars fail fast with a non-zero exit code."""
        result = runner.invoke(app, ["grow", "--tree-rules", "F]"])

        assert result.exit_code == 1

    def test_out_of_range_preset_exits_with_error(self) -> None:
        """Reject preset indexes outside the catalog."""
        result = runner.invoke(app, ["grow", "--tree-preset", "9"])

        assert result.exit_code == 1


class TestPresetsCommand:
    """Exercise the presets listing."""

    def test_lists_both_catalogs(self) -> None:
        """Ensure both catalogs are shown with the defaults marked."""
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0
        assert "tree presets:" in result.stdout
        assert "root presets:" in result.stdout
        assert "* 3: X -> F[*X[FL]][*X[FL]]" in result.stdout
