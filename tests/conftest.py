"""shared fixtures: a fake github API behind httpx.MockTransport"""

from collections import Counter
from typing import Any

import httpx
import pytest

from branchpick._messages import ConsoleReporter, Language

API_URL = "https://api.github.test"


class FakeGitHub:
    """canned responses keyed by request path

    a route maps to `(status, json_body)` or to an exception to raise
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, Any] | Exception] = {}
        self.calls: Counter[str] = Counter()
        self.headers: list[httpx.Headers] = []

    def branches(self, owner: str, repo: str, names: list[str]) -> None:
        self.routes[f"/repos/{owner}/{repo}/branches"] = (
            200,
            [{"name": n, "commit": {"sha": f"sha-{n}", "url": "u"}} for n in names],
        )

    def default(self, owner: str, repo: str, name: str) -> None:
        self.routes[f"/repos/{owner}/{repo}"] = (
            200,
            {"full_name": f"{owner}/{repo}", "default_branch": name},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        self.headers.append(request.headers)
        route = self.routes.get(path, (404, {"message": "Not Found"}))
        if isinstance(route, Exception):
            raise route
        status, body = route
        return httpx.Response(status, json=body)

    def client(self) -> httpx.Client:
        return httpx.Client(
            base_url=API_URL,
            transport=httpx.MockTransport(self.handler),
            headers={"Accept": "application/vnd.github.v3+json"},
        )


class RecordingReporter:
    def __init__(self):
        self.events: list[tuple[Any, dict[str, Any]]] = []
        self.pages: list[tuple[int, int, list[Any]]] = []
        self.prompts: list[str] = []

    def report(self, event, **details):
        self.events.append((event, details))

    def show_page(self, page, total_pages, entries):
        self.pages.append((page, total_pages, entries))

    def prompt(self, default):
        self.prompts.append(default)


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def console_output() -> list[str]:
    return []


@pytest.fixture
def console(console_output: list[str]) -> ConsoleReporter:
    def echo(message: str = "", nl: bool = True) -> None:
        console_output.append(message)

    return ConsoleReporter(Language.EN, echo=echo)
