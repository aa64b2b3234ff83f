"""Tests for issue URL validation."""

import pytest

from github_issue_url.security import (
    valid_issue_url,
    validate_scheme,
)
from github_issue_url.exceptions import UrlParseError


def test_validate_scheme():
    """Test that only HTTPS is accepted."""
    assert validate_scheme("https") is True
    assert validate_scheme("http") is False
    assert validate_scheme("ftp") is False


def test_valid_issue_url():
    """Test that a well-formed issue URL passes validation."""
    valid_issue_url(
        "https://github.com/EstebanBorai/github-issue-url/issues/new"
        "?title=Null%3A+The+Billion+Dollar+Mistake&labels=bug%2Cproduction"
    )


def test_valid_issue_url_with_non_https():
    """Test that non-HTTPS URLs are rejected."""
    with pytest.raises(UrlParseError):
        valid_issue_url("http://github.com/EstebanBorai/github-issue-url/issues/new")


def test_valid_issue_url_with_invalid_urls():
    """Test that invalid URLs are rejected."""
    with pytest.raises(UrlParseError):
        valid_issue_url("not-a-url")
    with pytest.raises(UrlParseError):
        valid_issue_url("")
    with pytest.raises(UrlParseError):
        valid_issue_url("https://github.com/Esteban Borai/repo/issues/new")
