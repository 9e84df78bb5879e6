"""PR data sources (GitHub-backed and synthetic) and the factory that picks one."""

import logging

from prtoolbox.adapters import GitHubAdapter
from prtoolbox.config import AppConfig
from prtoolbox.sources.base import PRDataSource
from prtoolbox.sources.github import GitHubPRSource
from prtoolbox.sources.synthetic import SyntheticPRSource, synthetic_record


def build_pr_source(config: AppConfig) -> PRDataSource:
    """GitHub-backed source when a token resolves, synthetic demo source
    otherwise."""
    token = config.github_token_resolved
    if not token:
        logging.getLogger("prtoolbox.sources").warning("GITHUB_TOKEN not provided, using synthetic data")
        return SyntheticPRSource()
    adapter = GitHubAdapter(
        token=token,
        api_url=config.github.api_url,
        timeout=config.github.timeout,
    )
    return GitHubPRSource(adapter)


__all__ = [
    "GitHubPRSource",
    "PRDataSource",
    "SyntheticPRSource",
    "build_pr_source",
    "synthetic_record",
]
