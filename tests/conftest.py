"""Pytest configuration and fixtures for github-issue-url tests."""

import pytest

from github_issue_url import Issue


SAMPLE_ISSUE_BODY = (
    "Null is a flag. It represents different situations depending on the "
    "context in which it is used and invoked. This yields the most serious "
    "error in software development: Coupling a hidden decision in the "
    "contract between an object and who uses it."
)

GITHUB_ISSUE_LINK = (
    "https://github.com/EstebanBorai/github-issue-url/issues/new"
    "?title=Null%3A+The+Billion+Dollar+Mistake"
    "&body=Null+is+a+flag.+It+represents+different+situations+depending+on+the"
    "+context+in+which+it+is+used+and+invoked.+This+yields+the+most+serious"
    "+error+in+software+development%3A+Coupling+a+hidden+decision+in+the"
    "+contract+between+an+object+and+who+uses+it."
    "&template=bug_report.md"
    "&labels=bug%2Cproduction%2Chigh-severity"
    "&assignee=EstebanBorai"
    "&milestone=1"
    "&projects=1"
)


@pytest.fixture
def issue() -> Issue:
    """Return an issue builder with no fields set."""
    return Issue("github-issue-url", "EstebanBorai")


@pytest.fixture
def sample_issue(issue) -> Issue:
    """Return an issue builder with every field set."""
    issue.title("Null: The Billion Dollar Mistake")
    issue.body(SAMPLE_ISSUE_BODY)
    issue.template("bug_report.md")
    issue.labels("bug,production,high-severity")
    issue.assignee("EstebanBorai")
    issue.milestone("1")
    issue.projects("1")
    return issue


@pytest.fixture
def github_issue_link() -> str:
    """Return the expected URL for the sample issue."""
    return GITHUB_ISSUE_LINK
