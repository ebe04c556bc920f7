"""Console reporter: CollectMethod plan → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from mrocollect.application.collect_method import CollectMethod
    from mrocollect.domain.model.provider_ref import ProviderRef


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Configuration for plan reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styling. False = plain text.
        show_module: Prefix owners with their module name.
    """

    width: int = 120
    color: bool = True
    show_module: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class CollectPlanReporter:
    """Renders which providers a derived operation calls, in order.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReporterConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReporterConfig()

    def report(self, method: CollectMethod) -> str:
        """Format the current plan of method.

        Args:
            method: Installed derived operation.

        Returns:
            Formatted string with header and provider table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        plan = method.plan()
        self._render_header(console, method, len(plan))
        if plan:
            self._render_plan(console, plan)
        else:
            console.print("[yellow]no providers located[/yellow]")

        return output.getvalue()

    def _render_header(self, console: Console, method: CollectMethod, count: int) -> None:
        """Render declaration summary."""
        console.rule(f"[bold]{escape(method.__qualname__)}[/bold]")
        console.print(f"[bold]Config:[/bold] {escape(str(method.config))}")
        console.print(f"[bold]Providers:[/bold] {count}")

    def _render_plan(self, console: Console, plan: tuple[ProviderRef, ...]) -> None:
        """Render providers table, one row per call."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Source")
        table.add_column("Owner")
        table.add_column("Attribute")

        for position, ref in enumerate(plan, start=1):
            table.add_row(
                str(position),
                ref.source.name.lower(),
                escape(self._owner_label(ref.owner)),
                escape(ref.name),
            )

        console.print(table)

    def _owner_label(self, owner: type) -> str:
        if self._config.show_module:
            return f"{owner.__module__}.{owner.__qualname__}"
        return owner.__qualname__
