"""Interactive prompts for operator credentials."""

import sys

import click
import questionary
from questionary import Style

from .platform.config import DEFAULT_USERNAME

PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#b48ead"),
        ("question", "fg:#d8dee9 bold"),
        ("answer", "fg:#e8915a"),
        ("instruction", "fg:#4c566a"),
    ]
)


class ClickCredentialPrompt:
    """Asks for the operator's username and password.

    Uses questionary on an interactive terminal and falls back to plain
    click prompts when stdin is piped.
    """

    def __init__(self, default_username: str | None = DEFAULT_USERNAME) -> None:
        self.default_username = default_username

    def ask_credentials(self) -> tuple[str, str]:
        click.echo("Log in to Ops Manager", err=True)
        if not sys.stdin.isatty():
            username = click.prompt(
                "Username", default=self.default_username, err=True
            )
            password = click.prompt("Password", hide_input=True, err=True)
            return username, password

        username = questionary.text(
            "Username:", default=self.default_username or "", style=PROMPT_STYLE
        ).ask()
        if not username:
            raise click.Abort()
        password = questionary.password("Password:", style=PROMPT_STYLE).ask()
        if password is None:
            raise click.Abort()
        return username, password
