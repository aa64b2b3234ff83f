"""GitHub prefilled issue URL builder.

GitHub prefills the "New Issue" form from query parameters passed to
``https://github.com/<owner>/<repository>/issues/new``. This package builds
those links, so an application can offer a one click "Open Issue" button
with details such as a stack trace or host information already filled in.

Key features:
- Every prefillable field (title, body, labels, assignee, milestone,
  projects, template)
- Query parameters kept in the order they were set
- Standard query string percent-encoding
- Typed errors for empty repository details and invalid URLs

Example usage:
    >>> import github_issue_url
    >>> issue = github_issue_url.Issue("github-issue-url", "EstebanBorai")
    >>> issue.title("Null: The Billion Dollar Mistake")
    >>> print(issue.url())
"""

import logging
from .issue import Issue, IssueUrlBuilder
from .security import valid_issue_url
from .exceptions import (
    GithubIssueUrlError,
    EmptyRepositoryOwnerError,
    EmptyRepositoryNameError,
    UrlParseError,
)

# Set up null handler to prevent "No handler found" warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version information
__version__ = "0.1.0"


__all__ = [
    # Core functionality
    "Issue",
    "IssueUrlBuilder",
    "valid_issue_url",
    # Exceptions
    "GithubIssueUrlError",
    "EmptyRepositoryOwnerError",
    "EmptyRepositoryNameError",
    "UrlParseError",
]
