"""github REST client implementation"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from branchpick import __version__
from branchpick._messages import Event, Reporter
from branchpick.settings import GITHUB_ACCEPT, REQUEST_TIMEOUT
from branchpick.types import BranchInfo, ListBranchesResult, RepoInfo, RepoTarget

logger = logging.getLogger(__name__)

# failures reported and collapsed to an empty result; InvalidURL is not an HTTPError
_SOFT_ERRORS = (
    httpx.HTTPError,
    httpx.InvalidURL,
    ValueError,
    TypeError,
    ValidationError,
)


def create_http_client(
    api_url: str,
    timeout: float = REQUEST_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """create an HTTP client bound to the github API

    Args:
        api_url: base URL of the API (e.g., 'https://api.github.com')
        timeout: per-request timeout in seconds
        transport: optional transport, e.g. httpx.MockTransport in tests

    Returns:
        client sending the versioned accept header on every request
    """
    return httpx.Client(
        base_url=api_url,
        headers={
            "Accept": GITHUB_ACCEPT,
            "User-Agent": f"branchpick/{__version__}",
        },
        timeout=timeout,
        transport=transport,
    )


def make_github_request(client: httpx.Client, path: str) -> httpx.Response:
    """make one GET request against the github API

    no retries; transport errors propagate to the caller
    """
    response = client.get(path)
    logger.debug("GET %s -> %s", response.request.url, response.status_code)
    return response


def _report(reporter: Reporter | None, event: Event, **details: Any) -> None:
    if reporter is not None:
        reporter.report(event, **details)


def fetch_branches(
    client: httpx.Client, target: RepoTarget, reporter: Reporter | None = None
) -> list[BranchInfo]:
    """list branches for a repository

    Args:
        client: client from `create_http_client`
        target: repository coordinates
        reporter: optional sink for failure events

    Returns:
        branches in the order the host lists them; empty on any failure
    """
    path = f"/repos/{target.owner}/{target.repo}/branches"
    try:
        response = make_github_request(client, path)
        if response.status_code != 200:
            logger.warning(
                "listing branches of %s failed: HTTP %s",
                target.full_name,
                response.status_code,
            )
            _report(reporter, Event.BRANCHES_HTTP_ERROR, status=response.status_code)
            return []
        result = ListBranchesResult.from_api_response(
            target.full_name, response.json()
        )
    except _SOFT_ERRORS as e:
        logger.warning("listing branches of %s failed: %s", target.full_name, e)
        _report(reporter, Event.BRANCHES_ERROR, error=e)
        return []

    return result.branches


def fetch_default_branch_name(
    client: httpx.Client, target: RepoTarget, reporter: Reporter | None = None
) -> str | None:
    """get the default branch the host declares for a repository

    Args:
        client: client from `create_http_client`
        target: repository coordinates
        reporter: optional sink for failure events

    Returns:
        the `default_branch` of the repository, or None on any failure
    """
    path = f"/repos/{target.owner}/{target.repo}"
    try:
        response = make_github_request(client, path)
        if response.status_code != 200:
            logger.warning(
                "fetching repository %s failed: HTTP %s",
                target.full_name,
                response.status_code,
            )
            _report(reporter, Event.REPO_HTTP_ERROR, status=response.status_code)
            return None
        repo_info = RepoInfo.model_validate(response.json())
    except _SOFT_ERRORS as e:
        logger.warning("fetching repository %s failed: %s", target.full_name, e)
        _report(reporter, Event.DEFAULT_BRANCH_ERROR, error=e)
        return None

    return repo_info.default_branch
