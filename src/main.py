from typing import Optional, TextIO
import click
from src.modules.app.commands import create_run_command
from src.modules.config import AppConfig, ConfigYamlValidator
from src.modules.logging import LOGGERS, LOG_LEVELS, create_logger
from src.modules.version.commands import create_version_commands


class LifelineContext:
    """Context object to store CLI state."""
    def __init__(self):
        self.logger = None
        self.config = AppConfig()

pass_context = click.make_pass_decorator(LifelineContext, ensure=True)

@click.group()
@click.option('--output', '-o',
              type=click.Choice(list(LOGGERS.keys())),
              default='colorful',
              help='Output format (colorful for CLI, plain for CI/file, json for machine parsing)',
              envvar='LIFELINE_OUTPUT')
@click.option('--log-level', '-l',
              type=click.Choice(LOG_LEVELS),
              default='INFO',
              help='Set the logging level',
              envvar='LIFELINE_LOG_LEVEL')
@click.option('--config', '-c', 'config_file',
              type=click.File('r'),
              help='YAML configuration file',
              envvar='LIFELINE_CONFIG')
@pass_context
def cli(ctx, output: str, log_level: str, config_file: Optional[TextIO]):
    """Lifeline: graceful shutdown and update checks."""
    ctx.logger = create_logger(output, log_level)
    if config_file is not None:
        try:
            ctx.config = ConfigYamlValidator.validate_and_load(config_file.read())
        except ValueError as err:
            raise click.BadParameter(str(err), param_hint="--config")

# Add commands
cli.add_command(create_run_command())
cli.add_command(create_version_commands())

def main():
    cli()

if __name__ == '__main__':
    main()
