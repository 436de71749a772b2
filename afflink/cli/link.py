"""Link Typer app factory."""

from pathlib import Path

import typer

from afflink.api.link.cmd_convert import cmd_convert
from afflink.api.link.cmd_report import cmd_report
from afflink.api.link.cmd_scan import cmd_scan
from afflink.api.link.cmd_sync import cmd_sync
from afflink.api.link.cmd_transform import cmd_transform
from afflink.api.link.render_report import REPORT_FORMATS
from afflink.cli._handle_stage_result import _handle_stage_result

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config file")
_PATTERN_OPTION = typer.Option(None, "--pattern", "-p", help="Override content include pattern")


def _print_report(output: dict) -> None:
    """Emit the rendered report as-is so it can be piped."""
    if output["report"]:
        typer.echo(output["report"])


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Scan, rewrite, report and sync content links",
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

    @app.command(name="scan")
    def scan_cmd(
        config: Path | None = _CONFIG_OPTION,
        pattern: str | None = _PATTERN_OPTION,
        affiliate_only: bool = typer.Option(False, "--affiliate-only", help="Only list affiliate links"),
    ) -> None:
        """Scan content files for links."""
        _handle_stage_result(cmd_scan)(config, pattern, affiliate_only)

    @app.command(name="convert")
    def convert_cmd(
        config: Path | None = _CONFIG_OPTION,
        pattern: str | None = _PATTERN_OPTION,
        network: str | None = typer.Option(None, "--network", "-n", help="Only convert links from this network"),
    ) -> None:
        """Preview canonical tagged URLs for detected affiliate links."""
        _handle_stage_result(cmd_convert)(config, pattern, network)

    @app.command(name="report")
    def report_cmd(
        config: Path | None = _CONFIG_OPTION,
        pattern: str | None = _PATTERN_OPTION,
        format: str = typer.Option("json", "--format", "-f", help=f"Output format: {', '.join(REPORT_FORMATS)}"),
        output: Path | None = typer.Option(None, "--output", "-o", help="Output file (prints to stdout if omitted)"),
        table: str = typer.Option("affiliate_links", "--table", "-t", help="Table name for SQL output"),
        affiliate_only: bool = typer.Option(False, "--affiliate-only", help="Only include affiliate links"),
    ) -> None:
        """Generate a report of the links in the content."""
        _handle_stage_result(cmd_report, result_printer=_print_report)(
            config, pattern, format, output, table, affiliate_only
        )

    @app.command(name="transform")
    def transform_cmd(
        config: Path | None = _CONFIG_OPTION,
        pattern: str | None = _PATTERN_OPTION,
        dry_run: bool = typer.Option(False, "--dry-run", help="Show changes without writing files"),
    ) -> None:
        """Rewrite external links in content files to tracking URLs."""
        _handle_stage_result(cmd_transform)(config, pattern, dry_run)

    @app.command(name="sync")
    def sync_cmd(
        config: Path | None = _CONFIG_OPTION,
        pattern: str | None = _PATTERN_OPTION,
        dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be synced without syncing"),
    ) -> None:
        """Upsert assigned links to the configured store."""
        _handle_stage_result(cmd_sync)(config, pattern, dry_run)

    return app
