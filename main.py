import logging

from github_issue_url import Issue, GithubIssueUrlError

# Set up logging configuration
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),  # Output to console
    ],
)
logger = logging.getLogger(__name__)


SAMPLE_ISSUE_BODY = (
    "Null is a flag. It represents different situations depending on the "
    "context in which it is used and invoked. This yields the most serious "
    "error in software development: Coupling a hidden decision in the "
    "contract between an object and who uses it."
)


def main():
    try:
        issue = Issue("github-issue-url", "EstebanBorai")
        issue.title("Null: The Billion Dollar Mistake")
        issue.body(SAMPLE_ISSUE_BODY)
        issue.template("bug_report.md")
        issue.labels("bug,production,high-severity")
        issue.assignee("EstebanBorai")
        issue.milestone("1")
        issue.projects("1")
        print(issue.url())
    except GithubIssueUrlError as e:
        logger.error("Failed to build issue URL: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
