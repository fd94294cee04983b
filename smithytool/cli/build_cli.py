#!/usr/bin/env python3
"""
CLI tool for running smithy builds and staging projection artifacts
"""

import click
import logging
import sys

from ..config.project_config_loader import load_project_config
from ..config.build.manager import SmithyBuildManager
from ..core.exceptions import SmithyToolError


class BuildCLI:
    """Command-line interface for smithy builds"""

    def __init__(self, project_config):
        self.project_config = project_config
        self.manager = SmithyBuildManager(project_config)
        self.logger = logging.getLogger(__name__)

    def show_args(self):
        """Print the resolved smithy build arguments, one per line"""
        try:
            invocation = self.manager.resolve()
        except SmithyToolError as e:
            click.echo(f"Error resolving build: {e}", err=True)
            return 1

        for arg in invocation.argv():
            click.echo(arg)
        return 0

    def run_build(self):
        """Resolve and run smithy build"""
        try:
            result = self.manager.build()
        except SmithyToolError as e:
            click.echo(f"Build failed: {e}", err=True)
            return 1

        click.echo(f"Smithy build succeeded. Output: {result.output_dir}")
        click.echo(f"Invocation hash: {result.invocation_hash}")
        return 0

    def run_stage(self, projection=None):
        """Stage projection artifacts"""
        try:
            result = self.manager.stage(projection)
        except SmithyToolError as e:
            click.echo(f"Staging failed: {e}", err=True)
            return 1

        result.print_summary()
        return 0


@click.group()
@click.option('--project', 'project_path', default=None, help='Path to smithy-project.yaml')
@click.option('--log-level', default='INFO',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              help='Set the logging level')
@click.pass_context
def cli(ctx, project_path, log_level):
    """Smithy build orchestration - settings come from smithy-project.yaml"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    try:
        project_config = load_project_config(project_path)
    except SmithyToolError as e:
        click.echo(f"Error loading project config: {e}", err=True)
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj['project_config'] = project_config
    ctx.obj['cli'] = BuildCLI(project_config)


@cli.command()
@click.pass_context
def args(ctx):
    """Show the resolved smithy build arguments"""
    sys.exit(ctx.obj['cli'].show_args())


@cli.command()
@click.pass_context
def build(ctx):
    """Run smithy build"""
    sys.exit(ctx.obj['cli'].run_build())


@cli.command()
@click.option('--projection', default=None, help='Projection to stage (defaults to the source projection)')
@click.pass_context
def stage(ctx, projection):
    """Stage smithy models for addition to a jar file"""
    sys.exit(ctx.obj['cli'].run_stage(projection))


@cli.command('projection-dir')
@click.argument('projection')
@click.argument('plugin')
@click.pass_context
def projection_dir(ctx, projection, plugin):
    """Print the artifact directory of a plugin within a projection"""
    click.echo(str(ctx.obj['cli'].manager.plugin_projection_dir(projection, plugin)))


if __name__ == "__main__":
    cli()
