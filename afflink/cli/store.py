"""Store Typer app factory."""

from pathlib import Path

import typer

from afflink.api.store.cmd_list import cmd_list
from afflink.api.store.cmd_show import cmd_show
from afflink.cli._handle_stage_result import _handle_stage_result


def store() -> typer.Typer:
    """Create and configure the store Typer app."""
    app = typer.Typer(
        name="store",
        help="Stored link records",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(
        config: Path | None = typer.Option(None, "--config", "-c", help="Path to config file"),
    ) -> None:
        """List every stored link."""
        _handle_stage_result(cmd_list)(config)

    @app.command(name="show")
    def show_cmd(
        slug: str = typer.Argument(..., help="Slug to look up"),
        config: Path | None = typer.Option(None, "--config", "-c", help="Path to config file"),
    ) -> None:
        """Show the stored link for a slug."""
        _handle_stage_result(cmd_show)(slug, config)

    return app
