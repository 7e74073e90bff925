"""tests for the interactive selection session"""

import io
import logging

import httpx
import pytest

from branchpick._messages import Event, LoggingReporter
from branchpick._session import BranchSession, resolve_branch

BRANCHES_PATH = "/repos/octocat/hello/branches"
REPO_PATH = "/repos/octocat/hello"


def answers(*lines: str) -> io.StringIO:
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture
def scenario(github):
    """branches main, dev, feature-x with main declared as default"""
    github.branches("octocat", "hello", ["main", "dev", "feature-x"])
    github.default("octocat", "hello", "main")
    return github


def session_for(github, reporter) -> BranchSession:
    return BranchSession("octocat/hello", reporter=reporter, http_client=github.client())


class TestDefaultResolution:
    def test_host_default_is_used(self, scenario, recorder):
        session = session_for(scenario, recorder)

        result = session.default_branch()

        assert result.name == "main"
        assert result.from_host
        # host answered, so the branch list was never needed
        assert scenario.calls[BRANCHES_PATH] == 0

    def test_fallback_fetches_branches_lazily(self, github, recorder):
        github.branches("octocat", "hello", ["beta", "master"])
        github.routes[REPO_PATH] = httpx.ConnectError("network down")
        session = session_for(github, recorder)

        result = session.default_branch()

        assert result.name == "master"
        assert not result.from_host
        assert github.calls[BRANCHES_PATH] == 1
        assert recorder.events[0][0] is Event.DEFAULT_BRANCH_ERROR

    @pytest.mark.parametrize(
        "names,expected",
        [(["dev", "master", "main"], "main"), (["dev", "master"], "master"), (["dev"], "dev")],
    )
    def test_fallback_priority(self, github, recorder, names, expected):
        github.branches("octocat", "hello", names)
        github.routes[REPO_PATH] = (500, {})

        assert session_for(github, recorder).default_branch_name() == expected

    def test_fallback_unknown_without_branches(self, github, recorder):
        assert session_for(github, recorder).default_branch_name() == "unknown"

    def test_fields_are_memoized(self, github, recorder):
        github.branches("octocat", "hello", ["dev"])
        github.routes[REPO_PATH] = (502, {})
        session = session_for(github, recorder)

        session.default_branch_name()
        session.default_branch_name()
        session.all_branches()
        session.page(0)

        assert github.calls[REPO_PATH] == 1
        assert github.calls[BRANCHES_PATH] == 1

    def test_empty_branch_list_is_memoized(self, github, recorder):
        session = session_for(github, recorder)

        session.all_branches()
        session.all_branches()

        assert github.calls[BRANCHES_PATH] == 1


class TestSelectBranch:
    def test_first_page_rendering(self, scenario, console, console_output):
        session = session_for(scenario, console)

        assert session.select_branch(answers("")) == "main"

        assert console_output[0] == "Fetching branch list..."
        assert "Page 1 of 1" in console_output[1]
        assert console_output[2:5] == ["1. main (default)", "2. dev", "3. feature-x"]
        assert "[main]" in console_output[5]

    def test_number_selects_branch(self, scenario, console):
        assert session_for(scenario, console).select_branch(answers("2")) == "dev"

    def test_label_one_is_default(self, github, console):
        github.branches("octocat", "hello", ["dev", "feature-x", "main"])
        github.default("octocat", "hello", "main")

        assert session_for(github, console).select_branch(answers("1")) == "main"

    def test_selection_follows_rendered_layout(self, github, console):
        github.branches("octocat", "hello", ["dev", "feature-x", "main"])
        github.default("octocat", "hello", "main")

        assert session_for(github, console).select_branch(answers("2")) == "dev"

    def test_input_is_trimmed(self, scenario, console):
        assert session_for(scenario, console).select_branch(answers("  3  ")) == "feature-x"

    def test_out_of_range_reprompts(self, scenario, console, console_output):
        result = session_for(scenario, console).select_branch(answers("5", "0", "-1", "2"))

        assert result == "dev"
        assert console_output.count("Invalid branch number") == 3

    def test_unrecognized_input_reprompts(self, scenario, console, console_output):
        result = session_for(scenario, console).select_branch(answers("dev", "2x", ""))

        assert result == "main"
        assert console_output.count("Invalid input") == 2

    def test_next_on_last_page(self, scenario, console, console_output):
        result = session_for(scenario, console).select_branch(answers("n", "N", ""))

        assert result == "main"
        assert console_output.count("Already on the last page") == 2

    def test_previous_on_first_page(self, scenario, console, console_output):
        result = session_for(scenario, console).select_branch(answers("p", "2"))

        assert result == "dev"
        assert console_output.count("Already on the first page") == 1
        assert all("Page 1 of 1" in line for line in console_output if "Page" in line)

    def test_paging_through_branches(self, github, console, console_output):
        names = ["main"] + [f"b{i:02d}" for i in range(15)]
        github.branches("octocat", "hello", names)
        github.default("octocat", "hello", "main")
        session = session_for(github, console)

        # page 2 holds b08..b14; label 3 is b10
        assert session.select_branch(answers("n", "3")) == "b10"
        assert any("Page 2 of 2" in line for line in console_output)

    def test_next_then_previous(self, github, console):
        names = ["main"] + [f"b{i:02d}" for i in range(15)]
        github.branches("octocat", "hello", names)
        github.default("octocat", "hello", "main")

        assert session_for(github, console).select_branch(answers("n", "P", "2")) == "b00"

    def test_empty_input_on_later_page_returns_default(self, github, console):
        names = ["main"] + [f"b{i:02d}" for i in range(15)]
        github.branches("octocat", "hello", names)
        github.default("octocat", "hello", "main")

        assert session_for(github, console).select_branch(answers("n", "")) == "main"

    def test_end_of_input_returns_default(self, scenario, console):
        assert session_for(scenario, console).select_branch(io.StringIO("")) == "main"
        assert session_for(scenario, console).select_branch(io.StringIO("x\n")) == "main"

    def test_no_branches_returns_unknown_without_prompt(
        self, github, console, console_output
    ):
        github.routes[BRANCHES_PATH] = (404, {})
        session = session_for(github, console)

        assert session.select_branch(answers("1")) == "unknown"

        assert console_output == [
            "Fetching branch list...",
            "Failed to fetch branches: HTTP 404",
            "Unable to fetch branch list or repository has no branches",
        ]
        assert github.calls[REPO_PATH] == 0

    def test_oversized_number_reprompts(self, scenario, console, console_output):
        result = session_for(scenario, console).select_branch(answers("9" * 5000, ""))

        assert result == "main"
        assert console_output.count("Invalid input") == 1

    def test_any_reporter_drives_selection(self, scenario, caplog):
        session = session_for(scenario, LoggingReporter())

        with caplog.at_level(logging.INFO, logger="branchpick"):
            assert session.select_branch(answers("n", "3")) == "feature-x"

        assert "Page 1 of 1" in caplog.text
        assert "1. main *" in caplog.text
        assert "Already on the last page" in caplog.text


class TestSessionLifecycle:
    def test_injected_client_left_open(self, scenario, recorder):
        client = scenario.client()

        with BranchSession("octocat/hello", reporter=recorder, http_client=client):
            pass

        assert not client.is_closed

    def test_owned_client_closed(self, recorder):
        with BranchSession("octocat/hello", reporter=recorder) as session:
            client = session._client

        assert client.is_closed

    def test_invalid_repo_rejected(self, recorder):
        with pytest.raises(ValueError, match="invalid repo format"):
            BranchSession("nope", reporter=recorder)

    def test_resolve_branch(self, scenario, console):
        result = resolve_branch(
            "octocat/hello",
            answers("3"),
            reporter=console,
            http_client=scenario.client(),
        )

        assert result == "feature-x"
