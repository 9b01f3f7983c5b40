"""Command line entry point for release-notify."""

from __future__ import annotations

import logging
import os
import sys

import click
from colorama import init, Fore

from release_notify.builder import build_envelope
from release_notify.config import Settings
from release_notify.errors import NotifyError
from release_notify.sender import send

init(autoreset=True)


@click.command()
def cli() -> None:
    """Send a CI release notification to a Slack incoming webhook.

    All input comes from environment variables; SLACK_WEBHOOK is required.
    """
    logging.basicConfig(level=logging.WARNING)

    try:
        settings = Settings.from_env(os.environ)
        envelope = build_envelope(settings)
        status = send(settings.webhook_url, envelope)
    except NotifyError as e:
        click.echo(f"{Fore.RED}Error: {e}", err=True)
        sys.exit(e.exit_code)

    click.echo(status)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
