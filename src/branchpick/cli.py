"""branchpick command line"""

import logging
from functools import partial

import click

from branchpick._messages import ConsoleReporter, Language, detect_language
from branchpick._session import resolve_branch
from branchpick.settings import settings
from branchpick.types import RepoTarget


def _parse_target(ctx: click.Context, param: click.Parameter, value: str) -> RepoTarget:
    try:
        return RepoTarget.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (defaults to BRANCHPICK_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """Pick a branch of a GitHub repository."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("repo", callback=_parse_target)
@click.option(
    "--lang",
    type=click.Choice([lang.value for lang in Language]),
    default=None,
    help="Message language (defaults to BRANCHPICK_LANGUAGE or the locale).",
)
def pick(repo: RepoTarget, lang: str | None) -> None:
    """Choose a branch of REPO (owner/repo) and print its name."""
    language = Language(lang) if lang else settings.language or detect_language()
    # listings and prompts on stderr, so stdout carries only the branch name
    reporter = ConsoleReporter(language, echo=partial(click.echo, err=True))
    branch = resolve_branch(repo, reporter=reporter)
    click.echo(branch)


@cli.command()
def serve() -> None:
    """Run the MCP server over stdio."""
    from branchpick.server import branchpick_mcp

    branchpick_mcp.run()
