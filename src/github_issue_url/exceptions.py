"""Custom exceptions for GitHub issue URL building."""


class GithubIssueUrlError(Exception):
    """Base exception for all github-issue-url errors."""


class EmptyRepositoryOwnerError(GithubIssueUrlError):
    """The repository owner was empty."""

    def __init__(self):
        super().__init__("Repository owner name is not defined")


class EmptyRepositoryNameError(GithubIssueUrlError):
    """The repository name was empty."""

    def __init__(self):
        super().__init__("Repository name is not defined")


class UrlParseError(GithubIssueUrlError):
    """The issue URL could not be parsed or encoded."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse URL with provided params. {detail}")
