"""
depviz CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from ..config import load_config
from ..core.exceptions import ConfigError
from .commands import explore, file, project, symbol
from .utils import configure_logging, echo_error


@click.group()
@click.version_option(package_name="depviz")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Config file (default: ./depviz.toml or [tool.depviz] in ./pyproject.toml)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None):
    """depviz: Dependency graphs from code manifests.

    Builds project, file and symbol graphs from a dependency manifest and
    its audit manifest, and browses the project tree.

    \b
    Quick Start:
      depviz project deps.json audit.json
      depviz file deps.json audit.json src/app.ts
      depviz symbol deps.json audit.json src/app.ts main --dependency-depth 2
      depviz explore deps.json --type class
    """
    configure_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        ctx.exit(1)
        return
    ctx.obj = {"config": config}


# Register commands
main.add_command(project.project)
main.add_command(file.file_view, name="file")
main.add_command(symbol.symbol)
main.add_command(explore.explore)

if __name__ == "__main__":
    main()
