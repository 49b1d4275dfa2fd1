"""
CLI commands for Have I Been Pwned checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from checkpwn.config import API_KEY_ENV_VAR, CheckpwnConfig, get_config_path
from checkpwn.errors import CheckpwnError, ConfigurationMissing
from checkpwn.hibp.client import BreachChecker
from checkpwn.hibp.hashing import SecretBuffer
from checkpwn.hibp.routes import HIBP_API_BASE, PWNED_PASSWORDS_API
from checkpwn.inputs import is_list_file, iter_identifiers
from checkpwn.report import render_password_result, render_verdict

console = Console()


def fail(error: CheckpwnError) -> NoReturn:
    """Print a single diagnostic for a failure and exit."""
    console.print(f"[red]Error ({error.stage}): {escape(str(error))}[/red]")
    raise SystemExit(1)


def load_api_key() -> str:
    try:
        return CheckpwnConfig.load().api_key
    except ConfigurationMissing as e:
        fail(e)


# =============================================================================
# Account Checking
# =============================================================================

@click.command("acc")
@click.argument("account")
@click.option(
    "--keep-going",
    is_flag=True,
    help="Log failed accounts in a list and continue with the next one",
)
@click.pass_context
def check_account(ctx: click.Context, account: str, keep_going: bool) -> None:
    """Check an account, or a .ls list of accounts, for breaches.

    Both the breached account and paste endpoints are queried.
    Requires an API key (see 'checkpwn register').

    Example:
        checkpwn acc test@example.com
        checkpwn acc accounts.ls
    """
    api_key = load_api_key()

    if is_list_file(account):
        on_error = BreachChecker.SKIP if keep_going else BreachChecker.ABORT

        async def _check_list():
            failures = 0
            async with BreachChecker(api_key=api_key) as checker:
                async for result in checker.check_accounts(iter_identifiers(account), on_error=on_error):
                    if isinstance(result, CheckpwnError):
                        failures += 1
                        console.print(f"[red]Error ({result.stage}): {escape(str(result))}[/red]")
                        continue
                    render_verdict(result.verdict, result.identifier, False, console)
            return failures

        try:
            failures = asyncio.run(_check_list())
        except CheckpwnError as e:
            fail(e)

        if failures:
            raise SystemExit(1)
        return

    async def _check():
        async with BreachChecker(api_key=api_key) as checker:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task(f"Checking {account}...", total=None)
                return await checker.check_account(account)

    try:
        result = asyncio.run(_check())
    except CheckpwnError as e:
        fail(e)

    render_verdict(result.verdict, result.identifier, False, console)


# =============================================================================
# Password Checking
# =============================================================================

@click.command("pass")
@click.pass_context
def check_password(ctx: click.Context) -> None:
    """Check if a password has been exposed in data breaches.

    Uses k-anonymity - only the first 5 characters of the SHA-1 hash
    are sent to the API. Your password never leaves your system.

    Example:
        checkpwn pass
    """
    secret = SecretBuffer(click.prompt("Password", hide_input=True))

    async def _check():
        async with BreachChecker() as checker:
            return await checker.check_password(secret)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Checking password...", total=None)
        try:
            result = asyncio.run(_check())
        except CheckpwnError as e:
            fail(e)
        finally:
            secret.clear()

    render_password_result(result, console)


# =============================================================================
# Configuration
# =============================================================================

@click.command("register")
@click.argument("api_key")
def register(api_key: str) -> None:
    """Save an HIBP API key for account checks.

    Get a key at: https://haveibeenpwned.com/API/Key

    Example:
        checkpwn register 0123456789abcdef
    """
    api_key = api_key.strip()
    if not api_key:
        raise click.BadParameter("API key must not be empty", param_hint="API_KEY")

    path = CheckpwnConfig(api_key=api_key).save()
    console.print(f"[green]API key saved to {path}[/green]")


@click.command("config")
def show_config() -> None:
    """Show checkpwn configuration and API key status."""
    try:
        api_key = CheckpwnConfig.load().api_key
    except ConfigurationMissing:
        api_key = None

    table = Table(title="checkpwn Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row(
        "API Key",
        f"[green]Set ({api_key[:4]}...)[/green]" if api_key else "[red]Not set[/red]"
    )
    table.add_row("Config File", str(get_config_path()))
    table.add_row("API Base URL", HIBP_API_BASE)
    table.add_row("Password API URL", PWNED_PASSWORDS_API)

    console.print(table)

    if not api_key:
        console.print("\n[yellow]To enable account breach checking:[/yellow]")
        console.print("  checkpwn register your_api_key")
        console.print(f"  or export {API_KEY_ENV_VAR}=your_api_key")
        console.print("  Get a key at: https://haveibeenpwned.com/API/Key")


def add_hibp_commands(main_cli):
    """Add HIBP commands to main CLI."""
    main_cli.add_command(check_account)
    main_cli.add_command(check_password)
    main_cli.add_command(register)
    main_cli.add_command(show_config)
