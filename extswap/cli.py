"""CLI entrypoint."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from extswap.coordinator import RunCoordinator, RunStatus
from extswap.exceptions import ConfigurationError
from extswap.models.config import RenameConfig
from extswap.models.rename import RenameOutcome
from extswap.processors.rename_executor import build_target_path


console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

CONFIRMATION_PROMPT = "Do you want to proceed with renaming? (y/N)"


def _print_usage_and_exit(ctx: click.Context, message: str = "") -> None:
    """Print an optional error and the full help text to stderr, then exit 1."""
    if message:
        err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        click.echo(err=True)
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    _print_usage_and_exit(ctx)


class ExtswapCommand(click.Command):
    """Command that reports usage errors with the full help text and exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            _print_usage_and_exit(ctx, e.format_message())


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _directory_argument(ctx: click.Context, param: click.Parameter, value: str | None) -> Path | None:
    if value is None:
        return None
    if not value.strip():
        raise click.BadParameter("The provided path is not a valid directory: ''")
    return Path(value)


def _report_error(error: ConfigurationError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")


@click.command(cls=ExtswapCommand, add_help_option=False)
@click.option(
    "-p",
    "--path",
    "directory",
    type=str,
    required=True,
    callback=_directory_argument,
    help="Directory to scan.",
)
@click.option(
    "-f",
    "--from",
    "source_extension",
    type=str,
    required=True,
    help="Extension to rename from (a leading '.' is optional).",
)
@click.option(
    "-t",
    "--to",
    "target_extension",
    type=str,
    required=True,
    help="Extension to rename to (a leading '.' is optional).",
)
@click.option(
    "-y",
    "--yes",
    "skip_confirmation",
    is_flag=True,
    default=False,
    help="Rename without asking for confirmation.",
)
@click.option("-r", "--recursive", is_flag=True, default=False, help="Recursively scan subdirectories.")
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help,
    help="Show this message and exit.",
)
def cli(
    directory: Path,
    source_extension: str,
    target_extension: str,
    skip_confirmation: bool,
    recursive: bool,
) -> None:
    """extswap - Change the extension of every matching file in a directory.

    Files whose extension matches --from (ignoring case) are renamed to use
    the --to extension instead.

    Examples:

        extswap -p ~/src -f cpp -t txt

        extswap -p ~/src -f .cpp -t .md -r -y
    """
    config = RenameConfig(
        directory_path=directory,
        source_extension=source_extension,
        target_extension=target_extension,
        recursive=recursive,
        skip_confirmation=skip_confirmation,
    )
    coordinator = RunCoordinator(config)

    def announce_scan(directory: Path) -> None:
        console.print(f"Scanning directory: [bold cyan]{escape(str(directory))}[/bold cyan]")

    def preview(candidates: list[Path]) -> None:
        console.print("[bold]Files found:[/bold]")
        for path in candidates:
            target = build_target_path(path, config.target_extension)
            console.print(
                f"  [cyan]{escape(_display_path(path, config.directory_path))}[/cyan]"
                f" -> [green]{escape(target.name)}[/green]"
            )
        console.print(
            f"Will change extensions from [cyan]'.{escape(config.source_extension)}'[/cyan] "
            f"to [cyan]'.{escape(config.target_extension)}'[/cyan]"
        )
        if config.skip_confirmation:
            console.print("---")

    def confirm(candidates: list[Path]) -> bool:
        try:
            answer = click.prompt(CONFIRMATION_PROMPT, default="", show_default=False, prompt_suffix=": ")
        except click.Abort:
            return False
        approved = answer.strip().lower() == "y"
        if approved:
            console.print("---")
        return approved

    def report_progress(outcome: RenameOutcome) -> None:
        console.print(f"Renaming: {escape(str(outcome.source))} -> {escape(str(outcome.target))}")
        if not outcome.succeeded:
            err_console.print(
                f"[red]  -> Failed to rename file '{escape(str(outcome.source))}': {escape(str(outcome.error))}[/red]"
            )

    try:
        result = coordinator.run(
            on_scan=announce_scan,
            preview=preview,
            confirm=confirm,
            on_outcome=report_progress,
        )
    except ConfigurationError as e:
        _report_error(e)
        raise SystemExit(1) from e

    if result.status is RunStatus.NO_MATCHES:
        console.print(
            f"[yellow]No files with extension '.{escape(config.source_extension)}' found to rename.[/yellow]"
        )
        return

    if result.status is RunStatus.CANCELLED:
        console.print("[yellow]Operation cancelled.[/yellow] No files were renamed.")
        return

    console.print("---")
    style = "bold green" if result.report.success_count else "yellow"
    console.print(f"[{style}]{result.report.summary()}[/{style}]")
