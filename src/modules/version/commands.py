from typing import Optional
import click

from .command.check import CheckCommand
from .command.compare import CompareCommand


def create_version_commands() -> click.Command:
    """Create the version command."""

    @click.group(name='version')
    @click.pass_context
    def version(ctx):
        """Compare versions and check for updates."""
        pass

    @version.command(name='compare')
    @click.argument('candidate')
    @click.argument('reference')
    @click.pass_context
    def compare(ctx, candidate: str, reference: str):
        """Compare CANDIDATE with REFERENCE (both major.minor.build)."""
        command = CompareCommand(logger=ctx.obj.logger)
        if not command.run(candidate, reference):
            ctx.exit(1)

    @version.command(name='check')
    @click.option('--url', type=str, help='Version manifest URL, overrides the configured one')
    @click.pass_context
    def check(ctx, url: Optional[str]):
        """Fetch the published version and report whether it is newer."""
        command = CheckCommand(logger=ctx.obj.logger, config=ctx.obj.config)
        if not command.run(url):
            ctx.exit(1)

    return version
