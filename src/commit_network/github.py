"""GitHub REST fetcher: builds a NetworkGraph for one repository.

Only the default branch's recent history is fetched; branch tips of other
branches are reported whether or not they fall inside that window.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any

import httpx

from commit_network.config import DEFAULT_FETCH, FetchConfig
from commit_network.ir.model import SHORT_SHA_LENGTH, BranchInfo, CommitNode, NetworkGraph

logger = logging.getLogger(__name__)

_OUTPUT_DATE_FORMAT = "%Y-%m-%d %H:%M"


class NetworkFetchError(RuntimeError):
    """Raised when the GitHub API cannot deliver the network data."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _headers(token: str | None) -> dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def first_line(message: str, limit: int) -> str:
    """First line of a commit message, shortened with '...' past `limit` chars."""
    newline = message.find("\n")
    if newline > 0:
        message = message[:newline]
    if len(message) > limit:
        message = message[: limit - 3] + "..."
    return message


def format_commit_date(value: str) -> str:
    """Reformat an ISO-8601 timestamp as 'yyyy-MM-dd HH:mm'; keep anything else as-is."""
    if not value:
        return value
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text).strftime(_OUTPUT_DATE_FORMAT)
    except ValueError:
        return value


def commit_from_api(item: dict[str, Any], tips: dict[str, list[str]], message_limit: int) -> CommitNode:
    """Convert one entry of ``GET /repos/{owner}/{repo}/commits``."""
    sha = item.get("sha") or ""
    commit_data = item.get("commit") or {}
    git_author = commit_data.get("author") or {}
    user = item.get("author")

    if user:
        author_login = user.get("login") or "Unknown"
        avatar_url = user.get("avatar_url") or ""
    else:
        author_login = git_author.get("name") or "Unknown"
        avatar_url = ""

    return CommitNode(
        sha=sha,
        short_sha=sha[:SHORT_SHA_LENGTH],
        message=first_line(commit_data.get("message") or "", message_limit),
        author_login=author_login,
        author_avatar_url=avatar_url,
        date=format_commit_date(git_author.get("date") or ""),
        parent_shas=tuple(p.get("sha") or "" for p in item.get("parents") or []),
        branches=tuple(tips.get(sha, [])),
    )


async def _get_json(client: httpx.AsyncClient, url: str, token: str | None, params: dict[str, Any] | None = None) -> Any:
    logger.debug("GET %s %s", url, params or "")
    try:
        resp = await client.get(url, headers=_headers(token), params=params)
    except httpx.HTTPError as e:
        raise NetworkFetchError(f"request to {url} failed: {e}") from e

    if resp.status_code == 401:
        raise NetworkFetchError("GitHub rejected the request: token missing or expired", status_code=401)
    if resp.status_code >= 400:
        raise NetworkFetchError(
            f"GitHub returned {resp.status_code} for {url}",
            status_code=resp.status_code,
        )
    try:
        return resp.json()
    except ValueError as e:
        raise NetworkFetchError(f"GitHub returned a non-JSON body for {url}") from e


async def _get_list(
    client: httpx.AsyncClient, url: str, token: str | None, params: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """GET a JSON array; entries that are not objects are skipped."""
    data = await _get_json(client, url, token, params)
    if not isinstance(data, list):
        raise NetworkFetchError(f"GitHub returned an unexpected body for {url}")
    return [item for item in data if isinstance(item, dict)]


async def get_network_graph(
    owner: str,
    repo: str,
    max_commits: int = DEFAULT_FETCH.max_commits,
    token: str | None = None,
    *,
    config: FetchConfig = DEFAULT_FETCH,
    client: httpx.AsyncClient | None = None,
) -> NetworkGraph:
    """Fetch branch tips and the newest `max_commits` default-branch commits.

    Args:
        owner: Repository owner (user or organisation).
        repo: Repository name.
        max_commits: Window size; capped at the API's page limit.
        token: Access token; falls back to the ``config.token_env`` variable.
        config: Endpoint, timeout and truncation settings.
        client: Optional client to reuse; it is left open.

    Returns:
        The NetworkGraph for the repository.

    Raises:
        NetworkFetchError: On transport errors or non-2xx responses.
    """
    if token is None:
        token = os.environ.get(config.token_env) or None

    own_client = client is None
    if client is None:
        client = httpx.AsyncClient(base_url=config.api_url, timeout=config.timeout, follow_redirects=True)

    try:
        repo_path = f"/repos/{owner}/{repo}"
        repo_info = await _get_json(client, repo_path, token)
        if not isinstance(repo_info, dict):
            raise NetworkFetchError(f"GitHub returned an unexpected body for {repo_path}")
        default_branch = repo_info.get("default_branch") or "main"

        branch_items = await _get_list(client, f"{repo_path}/branches", token, {"per_page": config.per_page_limit})
        branches: list[BranchInfo] = []
        tips: dict[str, list[str]] = {}
        for item in branch_items:
            name = item.get("name") or ""
            sha = (item.get("commit") or {}).get("sha") or ""
            branches.append(BranchInfo(name=name, sha=sha, is_default=name == default_branch))
            tips.setdefault(sha, []).append(name)

        per_page = max(1, min(max_commits, config.per_page_limit))
        if per_page < max_commits:
            logger.info("Commit window for %s/%s capped at %d (requested %d).", owner, repo, per_page, max_commits)
        commit_items = await _get_list(
            client,
            f"{repo_path}/commits",
            token,
            {"sha": default_branch, "per_page": per_page},
        )
        commits = [commit_from_api(item, tips, config.message_limit) for item in commit_items]
    finally:
        if own_client:
            await client.aclose()

    logger.debug("Fetched %d branches and %d commits for %s/%s", len(branches), len(commits), owner, repo)
    return NetworkGraph(branches=tuple(branches), commits=tuple(commits), default_branch=default_branch)
