import typer

from arbor.lsystem.presets import (DEFAULT_ROOT_PRESET, DEFAULT_TREE_PRESET,
                                   ROOT_PRESETS, TREE_PRESETS)


def presets_command() -> None:
    for title, catalog, default in (
        ("tree", TREE_PRESETS, DEFAULT_TREE_PRESET),
        ("root", ROOT_PRESETS, DEFAULT_ROOT_PRESET),
    ):
        typer.echo(f"{title} presets:")
        for index, replacement in enumerate(catalog):
            marker = "*" if index == default else " "
            typer.echo(f" {marker} {index}: X -> {replacement}")
