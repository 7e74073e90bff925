"""user-facing messages in chinese and english"""

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Protocol

import click

from branchpick.types import PageEntry

logger = logging.getLogger(__name__)


class Language(str, Enum):
    ZH = "zh"
    EN = "en"


class Event(str, Enum):
    FETCHING_BRANCHES = "fetching_branches"
    NO_BRANCHES = "no_branches"
    BRANCHES_HTTP_ERROR = "branches_http_error"
    BRANCHES_ERROR = "branches_error"
    REPO_HTTP_ERROR = "repo_http_error"
    DEFAULT_BRANCH_ERROR = "default_branch_error"
    PAGE_HEADER = "page_header"
    PROMPT = "prompt"
    LAST_PAGE = "last_page"
    FIRST_PAGE = "first_page"
    INVALID_BRANCH_NUMBER = "invalid_branch_number"
    INVALID_INPUT = "invalid_input"


# (zh, en) templates, formatted with str.format(**details)
MESSAGES: dict[Event, tuple[str, str]] = {
    Event.FETCHING_BRANCHES: ("正在获取分支列表...", "Fetching branch list..."),
    Event.NO_BRANCHES: (
        "无法获取分支列表或仓库没有分支",
        "Unable to fetch branch list or repository has no branches",
    ),
    Event.BRANCHES_HTTP_ERROR: (
        "获取分支失败: HTTP {status}",
        "Failed to fetch branches: HTTP {status}",
    ),
    Event.BRANCHES_ERROR: (
        "获取分支时发生错误: {error}",
        "Error fetching branches: {error}",
    ),
    Event.REPO_HTTP_ERROR: (
        "获取仓库信息失败: HTTP {status}",
        "Failed to fetch repository info: HTTP {status}",
    ),
    Event.DEFAULT_BRANCH_ERROR: (
        "获取默认分支时发生错误: {error}",
        "Error fetching default branch: {error}",
    ),
    Event.PAGE_HEADER: (
        "\n=== 分支列表 - 第 {page} 页 (共 {total_pages} 页) ===",
        "\n=== Branch List - Page {page} of {total_pages} ===",
    ),
    Event.PROMPT: (
        "请选择分支编号，输入 'n' 下一页，'p' 上一页，直接回车选择默认分支 [{default}]: ",
        "Select branch number, 'n' for next page, 'p' for previous page, "
        "press Enter for default [{default}]: ",
    ),
    Event.LAST_PAGE: ("已经是最后一页", "Already on the last page"),
    Event.FIRST_PAGE: ("已经是第一页", "Already on the first page"),
    Event.INVALID_BRANCH_NUMBER: ("无效的分支编号", "Invalid branch number"),
    Event.INVALID_INPUT: ("无效输入", "Invalid input"),
}

DEFAULT_MARKER = {Language.ZH: "默认分支", Language.EN: "default"}


def detect_language(env: Mapping[str, str] | None = None) -> Language:
    """pick chinese when the locale says so, english otherwise"""
    env = os.environ if env is None else env
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        if value := env.get(var):
            return Language.ZH if value.lower().startswith("zh") else Language.EN
    return Language.EN


def format_message(language: Language, event: Event, **details: Any) -> str:
    zh, en = MESSAGES[event]
    template = zh if language is Language.ZH else en
    return template.format(**details)


class Reporter(Protocol):
    """sink for the events, pages and prompts a session raises"""

    def report(self, event: Event, **details: Any) -> None: ...

    def show_page(
        self, page: int, total_pages: int, entries: list[PageEntry]
    ) -> None: ...

    def prompt(self, default: str) -> None: ...


class ConsoleReporter:
    """renders events, pages and prompts to the terminal"""

    def __init__(
        self,
        language: Language = Language.EN,
        echo: Callable[..., None] = click.echo,
    ):
        self.language = language
        self._echo = echo

    def format(self, event: Event, **details: Any) -> str:
        return format_message(self.language, event, **details)

    def report(self, event: Event, **details: Any) -> None:
        self._echo(self.format(event, **details))

    def show_page(
        self, page: int, total_pages: int, entries: list[PageEntry]
    ) -> None:
        self.report(Event.PAGE_HEADER, page=page + 1, total_pages=total_pages)
        marker = DEFAULT_MARKER[self.language]
        for entry in entries:
            line = f"{entry.label}. {entry.name}"
            if entry.is_default:
                line += f" ({marker})"
            self._echo(line)

    def prompt(self, default: str) -> None:
        self._echo(self.format(Event.PROMPT, default=default), nl=False)


class LoggingReporter:
    """sends events to the log instead of a terminal"""

    def __init__(self, language: Language = Language.EN):
        self.language = language

    def report(self, event: Event, **details: Any) -> None:
        logger.info(format_message(self.language, event, **details))

    def show_page(
        self, page: int, total_pages: int, entries: list[PageEntry]
    ) -> None:
        self.report(Event.PAGE_HEADER, page=page + 1, total_pages=total_pages)
        for entry in entries:
            marker = " *" if entry.is_default else ""
            logger.info("%s. %s%s", entry.label, entry.name, marker)

    def prompt(self, default: str) -> None:
        self.report(Event.PROMPT, default=default)
