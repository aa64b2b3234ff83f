"""Validation of issue URLs before they are handed to a browser."""

import logging

import validators

from .exceptions import UrlParseError

logger = logging.getLogger(__name__)


def validate_scheme(scheme: str) -> bool:
    if scheme == "https":
        return True
    return False


def valid_issue_url(url: str) -> None:
    """
    Validate that an issue URL is syntactically valid.

    Args:
        url: The URL to validate

    Raises:
        UrlParseError: If the URL is rejected by the validator
    """
    try:
        result = validators.url(url, validate_scheme=validate_scheme)
    except validators.ValidationError as e:
        result = e

    if not result:
        error_msg = f"{url} is not a valid URL"
        logger.error("URL validation error %s", result)
        raise UrlParseError(error_msg)
