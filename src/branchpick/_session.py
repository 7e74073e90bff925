"""one interactive branch selection"""

import logging
import re
import sys
from typing import TextIO

import httpx

from branchpick import _github
from branchpick._messages import ConsoleReporter, Event, Reporter, detect_language
from branchpick._pagination import PAGE_SIZE, build_page, render_page, total_pages
from branchpick._resolver import UNKNOWN_BRANCH, find_fallback_default_branch
from branchpick.settings import REQUEST_TIMEOUT, settings
from branchpick.types import BranchInfo, BranchPage, DefaultBranchResult, RepoTarget

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


class BranchSession:
    """resolves the branch to work on for one repository

    the branch list and the default branch are fetched at most once and
    kept for the life of the session. use as a context manager so the HTTP
    client it creates gets closed; a client passed in is left open.
    """

    def __init__(
        self,
        target: RepoTarget | str,
        *,
        reporter: Reporter | None = None,
        http_client: httpx.Client | None = None,
        api_url: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        page_size: int = PAGE_SIZE,
    ):
        self.target = target if isinstance(target, RepoTarget) else RepoTarget.parse(target)
        if reporter is None:
            reporter = ConsoleReporter(settings.language or detect_language())
        self.reporter = reporter
        self.page_size = page_size

        self._owns_client = http_client is None
        self._client = http_client or _github.create_http_client(
            api_url or settings.github_api_url, timeout
        )
        self._branches: list[BranchInfo] | None = None
        self._default: DefaultBranchResult | None = None

    def __enter__(self) -> "BranchSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def all_branches(self) -> list[BranchInfo]:
        if self._branches is None:
            self._branches = _github.fetch_branches(
                self._client, self.target, self.reporter
            )
        return self._branches

    def default_branch(self) -> DefaultBranchResult:
        """host-declared default, or a name picked from the branch list"""
        if self._default is None:
            name = _github.fetch_default_branch_name(
                self._client, self.target, self.reporter
            )
            from_host = name is not None
            if name is None:
                name = find_fallback_default_branch(self.all_branches())
                logger.info(
                    "using fallback default branch %r for %s",
                    name,
                    self.target.full_name,
                )
            self._default = DefaultBranchResult(
                repo=self.target.full_name, name=name, from_host=from_host
            )
        return self._default

    def default_branch_name(self) -> str:
        return self.default_branch().name

    def page(self, number: int) -> BranchPage:
        """0-based page of the branch list"""
        return build_page(
            self.all_branches(), self.default_branch_name(), number, self.page_size
        )

    def select_branch(self, stdin: TextIO | None = None) -> str:
        """prompt until the user picks a branch

        Args:
            stdin: stream to read answers from, one per line (default sys.stdin)

        Returns:
            the chosen branch name; the default on an empty answer or end of
            input; `UNKNOWN_BRANCH` when there are no branches
        """
        reporter = self.reporter
        stdin = stdin or sys.stdin

        reporter.report(Event.FETCHING_BRANCHES)
        branches = self.all_branches()
        if not branches:
            reporter.report(Event.NO_BRANCHES)
            return UNKNOWN_BRANCH

        default = self.default_branch_name()
        pages = total_pages(branches, self.page_size)
        current = 0

        while True:
            entries = render_page(branches, default, current, self.page_size)
            reporter.show_page(current, pages, entries)
            reporter.prompt(default)

            line = stdin.readline()
            if not line:
                # input closed
                return default
            answer = line.strip()

            if not answer:
                return default
            elif answer.lower() == "n":
                if current < pages - 1:
                    current += 1
                else:
                    reporter.report(Event.LAST_PAGE)
            elif answer.lower() == "p":
                if current > 0:
                    current -= 1
                else:
                    reporter.report(Event.FIRST_PAGE)
            elif _INTEGER.fullmatch(answer):
                try:
                    index = int(answer) - 1
                except ValueError:
                    # longer than int() will convert
                    reporter.report(Event.INVALID_INPUT)
                    continue
                if 0 <= index < len(entries):
                    return entries[index].name
                reporter.report(Event.INVALID_BRANCH_NUMBER)
            else:
                reporter.report(Event.INVALID_INPUT)


def resolve_branch(
    target: RepoTarget | str, stdin: TextIO | None = None, **session_kwargs
) -> str:
    """run one interactive selection and return the chosen branch"""
    with BranchSession(target, **session_kwargs) as session:
        return session.select_branch(stdin)
