"""
命令行入口
"""

from typing import List, Optional

import click

from dnshosts.app import HostsApp
from dnshosts.config import Config
from dnshosts.errors import HostsError, InvalidActionError, InvalidArgumentCountError

USAGE = "Usage: dns-hosts [action] [domain] [ip]"
EXAMPLE = "Example: dns-hosts add example.com 127.0.0.1"


def echo_content(lines: List[str]) -> None:
    click.echo("Current hosts file content:")
    for line in lines:
        click.echo(line)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("action", required=False)
@click.argument("domain", required=False)
@click.argument("ip", required=False)
@click.pass_context
def main(ctx: click.Context, action: Optional[str], domain: Optional[str], ip: Optional[str]) -> None:
    """
    Manage entries of the system hosts file.

    ACTION is one of add, list, edit or del. IP defaults to 127.0.0.1.
    Without arguments the current hosts file is printed.
    """
    try:
        app = HostsApp(Config.from_env())

        if action is None:
            echo_content(app.list_entries())
            click.echo(USAGE)
            click.echo(EXAMPLE)
            return

        if domain is None:
            raise InvalidArgumentCountError(
                "Insufficient number of arguments. Use 'dns-hosts [action] [domain] [ip]'."
            )

        message = app.run(action, domain, ip)
        if message:
            click.echo(message)
        echo_content(app.list_entries())

    except InvalidActionError as e:
        click.echo(e.message, err=True)
        ctx.exit(int(e.exit_code))
    except HostsError as e:
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(int(e.exit_code))
