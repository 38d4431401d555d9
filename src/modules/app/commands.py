import asyncio
import click

from .application import Application


def create_run_command() -> click.Command:
    """Create the run command."""

    @click.command(name='run')
    @click.pass_context
    def run(ctx):
        """Run in the foreground until interrupted.

        Ctrl+C or SIGTERM closes the application gracefully.
        """
        application = Application(config=ctx.obj.config, logger=ctx.obj.logger)
        asyncio.run(application.run())

    return run
