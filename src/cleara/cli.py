"""CLI interface for Cleara."""

from __future__ import annotations

import logging
import sys

import click

from cleara import __version__
from cleara.core.audit import setup_audit_log
from cleara.core.orchestrator import Orchestrator
from cleara.models.operation import Action
from cleara.models.run_config import RunConfig
from cleara.settings import Settings

# Selector flag parameter names and the action each one picks.
SELECTORS: dict[str, Action] = {
    "all_": Action.ALL,
    "tmp": Action.CLEAN_TMP,
    "cache": Action.CLEAN_USER_CACHE,
    "pkg": Action.CLEAN_PKG_CACHE,
    "purge": Action.PURGE_CONFIGS,
}

# Usage errors (unknown flags, conflicting selectors) exit with this code.
USAGE_EXIT_CODE = 1


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


class ClearaCommand(click.Command):
    """Command that rejects conflicting selectors and exits 1 on usage errors."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            rest = super().parse_args(ctx, args)
            given = [name for name in SELECTORS if ctx.params.get(name)]
            if len(given) > 1:
                flags = ", ".join(f"--{name.rstrip('_')}" for name in given)
                raise click.UsageError(f"Choose only one action, got: {flags}", ctx=ctx)
            return rest
        except click.UsageError as exc:
            exc.exit_code = USAGE_EXIT_CODE
            raise


def _selected_action(params: dict[str, bool]) -> Action | None:
    for name, action in SELECTORS.items():
        if params.get(name):
            return action
    return None


@click.command(cls=ClearaCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--all", "all_", is_flag=True, help="Perform full cleanup")
@click.option("--tmp", is_flag=True, help="Clean /tmp directory")
@click.option("--cache", is_flag=True, help="Clean user/system cache")
@click.option("--pkg", is_flag=True, help="Clean package cache")
@click.option("--purge", is_flag=True, help="Purge old configs")
@click.option("--dry-run", is_flag=True, help="Preview actions without deleting")
@click.option("--quiet", is_flag=True, help="Minimal output (for cron jobs)")
@click.option("--no-color", is_flag=True, help="Disable color output")
@click.option("--verbose", count=True, help="Increase log verbosity (--verbose info, twice for debug)")
@click.version_option(__version__, "-v", "--version", message="Cleara v%(version)s by raaahulllls")
def main(
    all_: bool,
    tmp: bool,
    cache: bool,
    pkg: bool,
    purge: bool,
    dry_run: bool,
    quiet: bool,
    no_color: bool,
    verbose: int,
) -> None:
    """Cleara: advanced & safe Linux cleanup tool.

    Without an action flag an interactive menu is shown.
    """
    _setup_logging(verbose)

    config = RunConfig(
        dry_run=dry_run,
        quiet=quiet,
        no_color=no_color,
        selected_action=_selected_action(
            {"all_": all_, "tmp": tmp, "cache": cache, "pkg": pkg, "purge": purge}
        ),
    )
    settings = Settings.instance()
    setup_audit_log(settings)

    orchestrator = Orchestrator(config, settings=settings)
    sys.exit(orchestrator.run())
