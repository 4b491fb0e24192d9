"""Output formatting for Boomer Buddy CLI commands."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from boomer_buddy.privacy import ScrubResult
from boomer_buddy.risk import QuickCheckVerdict, RiskAssessment
from boomer_buddy.rulesets.types import Rule
from boomer_buddy.severity import Severity

logger = logging.getLogger(__name__)
console = Console()

SEVERITY_STYLES = {
    Severity.LOW: "green",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
    Severity.CRITICAL: "bold red",
}

VERDICT_STYLES = {
    QuickCheckVerdict.SAFE: "green",
    QuickCheckVerdict.SUSPICIOUS: "yellow",
    QuickCheckVerdict.DANGEROUS: "bold red",
}


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    def format_assessment(self, assessment: RiskAssessment) -> None:
        """Print a human-readable assessment."""
        style = SEVERITY_STYLES[assessment.overall_risk]
        risk = _styled(assessment.overall_risk.value.upper(), style)
        summary = (
            f"Overall risk: {risk}\n"
            f"Confidence: [blue]{assessment.confidence}%[/blue]"
        )
        if assessment.immediate_action_required:
            summary += "\n[bold red]Immediate action required[/bold red]"
        console.print(
            Panel(summary, title="🛡️  Scam Risk Assessment", border_style=style)
        )

        matched = assessment.matched_indicators
        if matched:
            table = Table(
                title="🔎 Warning Signs",
                show_header=True,
                header_style="bold magenta",
            )
            table.add_column("Indicator", style="cyan", no_wrap=True)
            table.add_column("Severity")
            table.add_column("Description", style="white")
            table.add_column("Matched", style="dim")
            for indicator in matched:
                table.add_row(
                    indicator.category,
                    _styled(
                        indicator.severity.value, SEVERITY_STYLES[indicator.severity]
                    ),
                    escape(indicator.description),
                    escape(", ".join(indicator.matched_patterns)),
                )
            console.print(table)
        else:
            console.print("[green]No warning signs found.[/green]")

        console.print("\n[bold]What to do:[/bold]")
        for number, recommendation in enumerate(assessment.recommendations, start=1):
            console.print(
                f"  {number}. {recommendation}", markup=False, highlight=False
            )

    def format_verdict(self, verdict: QuickCheckVerdict) -> None:
        """Print a quick-check verdict."""
        console.print(
            f"Quick check: {_styled(verdict.value.upper(), VERDICT_STYLES[verdict])}"
        )

    def format_scrub_result(self, result: ScrubResult) -> None:
        """Print scrubbed text and the PII types removed."""
        if result.hard_blocked:
            console.print(
                Panel(
                    "[yellow]Sensitive personal information (SSN or card number) "
                    "found. The text has been withheld.[/yellow]",
                    title="⚠️  Blocked for Protection",
                    border_style="yellow",
                )
            )
        elif result.has_pii:
            removed = ", ".join(result.blocked_types)
            console.print(f"[dim]Removed: {removed}[/dim]", highlight=False)
        console.print(result.scrubbed_text, markup=False, highlight=False)

    def format_ruleset_list(self, rulesets: list[tuple[str, str, type[Rule]]]) -> None:
        """Print the registered rulesets as a table."""
        if not rulesets:
            console.print(
                Panel(
                    "[yellow]No rulesets available. "
                    "Register rulesets to see them here.[/yellow]",
                    title="⚠️  Warning",
                    border_style="yellow",
                )
            )
            logger.warning("No rulesets registered in registry")
            return

        table = Table(
            title="🔧 Available Rulesets",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("URI", style="cyan", no_wrap=True)
        table.add_column("Rule Type", style="dim")
        for name, version, rule_type in rulesets:
            table.add_row(f"local/{name}/{version}", rule_type.__name__)
        console.print(table)
