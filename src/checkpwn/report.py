"""
Terminal output of breach verdicts.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from checkpwn.hibp.models import BreachVerdict, PasswordCheckResult, RiskLevel

REDACTED = "********"


def risk_color(risk: RiskLevel) -> str:
    """Get color for risk level."""
    colors = {
        RiskLevel.SAFE: "green",
        RiskLevel.LOW: "yellow",
        RiskLevel.MEDIUM: "orange3",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


def display_label(label: str, is_secret: bool) -> str:
    """Label to show for a checked value; secrets are never shown."""
    return REDACTED if is_secret else label


def render_verdict(
    verdict: BreachVerdict,
    label: str,
    is_secret: bool,
    console: Console,
) -> Text:
    """Print 'Breach status for <label>: <verdict>'."""
    color = "red" if verdict is BreachVerdict.BREACHED else "green"

    text = Text("Breach status for ")
    text.append(display_label(label, is_secret), style="cyan")
    text.append(": ")
    text.append(verdict.label, style=color)

    console.print(text)
    return text


def render_password_result(result: PasswordCheckResult, console: Console) -> None:
    """Print the verdict for a password plus its exposure details."""
    render_verdict(result.verdict, "", True, console)

    if not result.is_pwned:
        return

    color = risk_color(result.risk_level)
    console.print(Panel(
        f"This password has been seen [bold]{result.occurrences:,}[/bold] times in data breaches!\n\n"
        f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]\n\n"
        f"{result.risk_description}",
        title="Password Check Result"
    ))
