"""
Open a prefilled bug report on GitHub

This example demonstrates how to use the github-issue-url library to offer
a one click "Open Issue" action from an application. The report body is
prefilled with details read from the host system, so the user does not have
to collect them by hand.

The script:
1. Loads environment variables for the repository owner and name
2. Builds a prefilled issue URL including platform details
3. Opens the issue URL in the user's default web browser

Required environment variables:
- GITHUB_REPOSITORY_OWNER: User or organization owning the repository
- GITHUB_REPOSITORY_NAME: Name of the repository

Usage:
    python examples/open_issue.py
"""

import logging
import os
import platform
import sys
import webbrowser
from dotenv import load_dotenv
import github_issue_url


# Set up logging configuration
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),  # Output to console
    ],
)
logger = logging.getLogger(__name__)


def system_details() -> str:
    """Describe the host the application is running on."""
    return "\n".join(
        [
            "## System details",
            "",
            f"- OS: {platform.system()} {platform.release()}",
            f"- Machine: {platform.machine()}",
            f"- Python: {platform.python_version()}",
            f"- github-issue-url: {github_issue_url.__version__}",
        ]
    )


def main() -> bool:
    """
    Build a prefilled bug report URL and open it in the browser.

    Returns:
        bool: True if the browser was opened, False if required environment
              variables are missing or the URL could not be built.
    """
    load_dotenv()

    owner = os.getenv("GITHUB_REPOSITORY_OWNER")
    if not owner:
        logger.error("Missing GITHUB_REPOSITORY_OWNER environment variable")
        print("Error: Missing GITHUB_REPOSITORY_OWNER environment variable")
        return False

    name = os.getenv("GITHUB_REPOSITORY_NAME")
    if not name:
        logger.error("Missing GITHUB_REPOSITORY_NAME environment variable")
        print("Error: Missing GITHUB_REPOSITORY_NAME environment variable")
        return False

    try:
        issue = github_issue_url.Issue(name, owner)
        issue.title("Bug report")
        issue.body(system_details())
        issue.labels("bug")
        issue_url = issue.url()
        github_issue_url.valid_issue_url(issue_url)
    except github_issue_url.GithubIssueUrlError as e:
        logger.error("Failed to build issue URL: %s", e)
        return False

    logger.info("Opening issue URL: %s", issue_url)
    webbrowser.open(issue_url)

    return True


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
