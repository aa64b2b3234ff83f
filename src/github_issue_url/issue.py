"""Prefilled GitHub issue URL builder.

GitHub prefills the "New Issue" form from query parameters passed to
``https://github.com/<owner>/<repository>/issues/new``. The :class:`Issue`
builder collects those parameters and renders the final link.
"""

import logging
from typing import List, Tuple
from urllib.parse import quote, urlencode

from .exceptions import (
    EmptyRepositoryNameError,
    EmptyRepositoryOwnerError,
    UrlParseError,
)

logger = logging.getLogger(__name__)

GITHUB_URL = "https://github.com"

# sub-delims plus ":" and "@" are legal in a path segment; "/" keeps nested owners
PATH_SAFE = "/!$&'()*+,;=:@"


class Issue:
    """
    GitHub issue with support for every prefillable field.

    Fields are kept as an ordered list of ``(name, value)`` pairs, so the
    query string follows the order the setters were called in. Calling a
    setter twice adds the parameter twice.

    Example:
        >>> issue = Issue("github-issue-url", "EstebanBorai")
        >>> issue.title("Null: The Billion Dollar Mistake")
        >>> issue.labels("bug,production")
        >>> issue.url()
        'https://github.com/EstebanBorai/github-issue-url/issues/new?title=Null%3A+The+Billion+Dollar+Mistake&labels=bug%2Cproduction'
    """

    def __init__(self, repository_name: str, repository_owner: str):
        """
        Args:
            repository_name: Name of the repository
            repository_owner: User or organization owning the repository

        Raises:
            EmptyRepositoryNameError: If repository_name is empty
            EmptyRepositoryOwnerError: If repository_owner is empty
        """
        if not repository_name:
            logger.error("Cannot build issue URL: repository name is required")
            raise EmptyRepositoryNameError()

        if not repository_owner:
            logger.error("Cannot build issue URL: repository owner is required")
            raise EmptyRepositoryOwnerError()

        self._repository_name = repository_name
        self._repository_owner = repository_owner
        self._params: List[Tuple[str, str]] = []

    @property
    def repository_name(self) -> str:
        return self._repository_name

    @property
    def repository_owner(self) -> str:
        return self._repository_owner

    @property
    def params(self) -> Tuple[Tuple[str, str], ...]:
        """Snapshot of the accumulated ``(name, value)`` pairs."""
        return tuple(self._params)

    def __eq__(self, other):
        if not isinstance(other, Issue):
            return NotImplemented
        return (
            self._repository_name == other._repository_name
            and self._repository_owner == other._repository_owner
            and self._params == other._params
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Issue(repository_name={self._repository_name!r}, "
            f"repository_owner={self._repository_owner!r}, "
            f"params={self._params!r})"
        )

    def assignee(self, assignee: str) -> None:
        """
        The username of the issue's assignee.

        The issue author requires write access to the repository in order to
        use this feature.
        """
        self._params.append(("assignee", assignee))

    def body(self, body: str) -> None:
        """Prefilled issue body content."""
        self._params.append(("body", body))

    def labels(self, labels: str) -> None:
        """
        Issue labels separated by comma, e.g. ``bug,production,high-severity``.

        The issue author requires write access to the repository in order to
        use this feature.
        """
        self._params.append(("labels", labels))

    def milestone(self, milestone: str) -> None:
        """
        The ID (number) of the milestone linked to this issue.

        The ID is the last segment of
        ``https://github.com/<owner>/<repository>/milestone/<milestone id>``.
        """
        self._params.append(("milestone", milestone))

    def projects(self, projects: str) -> None:
        """
        The IDs (numbers) of the projects to link this issue to, separated
        by comma.

        The ID is the last segment of
        ``https://github.com/<owner>/<repository>/projects/<project id>``.
        """
        self._params.append(("projects", projects))

    def title(self, title: str) -> None:
        """Prefilled issue title."""
        self._params.append(("title", title))

    def template(self, template: str) -> None:
        """
        Name of the issue template to open the form with.

        Templates live in ``.github/ISSUE_TEMPLATE/``; to use
        ``ISSUE_TEMPLATE/bugs.md`` pass ``bugs.md``.
        """
        self._params.append(("template", template))

    def url(self) -> str:
        """
        Build the prefilled issue URL.

        Returns:
            The new issue URL with every field encoded as a query parameter

        Raises:
            UrlParseError: If a value cannot be encoded
        """
        try:
            owner_enc = quote(self._repository_owner, safe=PATH_SAFE)
            name_enc = quote(self._repository_name, safe=PATH_SAFE)
            query = urlencode(self._params, safe="*")
        except ValueError as e:
            # lone surrogates cannot be UTF-8 encoded
            logger.error(
                "Failed to encode issue URL for %s/%s: %s",
                self._repository_owner,
                self._repository_name,
                e,
            )
            raise UrlParseError(str(e)) from e

        issue_url = f"{GITHUB_URL}/{owner_enc}/{name_enc}/issues/new"
        if query:
            issue_url = f"{issue_url}?{query}"

        logger.debug(
            "Built issue URL for %s/%s with %d params",
            self._repository_owner,
            self._repository_name,
            len(self._params),
        )
        return issue_url

    build = url


IssueUrlBuilder = Issue
