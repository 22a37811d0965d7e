# platkit Console Output
# Rich-based console output for classification results

from typing import Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table

from platkit.config.schema import OutputConfig
from platkit.report import PlatformReport
from platkit.version.versions import VersionTuple


def _version_text(version: Optional[VersionTuple]) -> str:
    return str(version) if version is not None else "[dim]none[/dim]"


def _flag_text(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for classification results.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Show every classification column.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(force_terminal=colored, no_color=not colored)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False)

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]", highlight=False)

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]", highlight=False)

    def print_report(self, report: PlatformReport) -> None:
        """Print every classification of one triple as a two-column table."""
        table = Table(title=str(report.triple), show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        if report.has_platform:
            table.add_row("Platform", f"[green]{report.platform_name}[/green]")
        else:
            table.add_row("Platform", "[yellow](no platform)[/yellow]")
        if report.darwin_kind is not None:
            table.add_row("Darwin kind", report.darwin_kind.value)
        table.add_row("Architecture", report.major_architecture)
        table.add_row("Module triple", str(report.module_triple))
        table.add_row("Unversioned triple", str(report.unversioned_triple))
        table.add_row("Runtime compatibility", _version_text(report.runtime_version))
        table.add_row("Needs runtime rpath", _flag_text(report.requires_rpath))
        table.add_row("Inferred simulator", _flag_text(report.infers_simulator))
        table.add_row("Mac Catalyst", _flag_text(report.mac_catalyst))

        self._console.print()
        self._console.print(table)
        self._console.print()

    def print_reports(self, reports: list[PlatformReport]) -> None:
        """Print a matrix of reports, one row per triple."""
        if not reports:
            self._console.print("[dim]No targets to display[/dim]")
            return

        table = Table(title="Target Platforms", show_header=True, header_style="bold")
        table.add_column("Triple", style="cyan")
        table.add_column("Platform", style="green")
        table.add_column("Arch")
        table.add_column("Runtime", justify="center")
        if self.verbose:
            table.add_column("Module triple", style="magenta")
            table.add_column("Unversioned", style="dim")
            table.add_column("rpath", justify="center")

        for report in reports:
            platform = report.platform_name if report.has_platform else "[yellow]-[/yellow]"
            row = [
                str(report.triple),
                platform,
                report.major_architecture,
                _version_text(report.runtime_version),
            ]
            if self.verbose:
                row += [
                    str(report.module_triple),
                    str(report.unversioned_triple),
                    _flag_text(report.requires_rpath),
                ]
            table.add_row(*row)

        self._console.print()
        self._console.print(table)
        self._console.print()


def create_console(config: Optional[OutputConfig] = None, *, verbose: Optional[bool] = None) -> Console:
    """
    Create a console from output configuration.

    Args:
        config: Output settings; defaults apply when None.
        verbose: Overrides the configured verbosity when given.
    """
    config = config or OutputConfig()
    return Console(
        verbose=config.verbose if verbose is None else verbose,
        colored=config.colored,
    )
