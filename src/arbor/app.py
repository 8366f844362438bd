import typer

from arbor.cli.commands.grow import grow_command
from arbor.cli.commands.presets import presets_command
from arbor.utilities.logging import enable_file_logging

app = typer.Typer()

app.command(name="grow")(grow_command)
app.command(name="presets")(presets_command)


def main() -> None:
    enable_file_logging()
    app()


if __name__ == "__main__":
    main()
