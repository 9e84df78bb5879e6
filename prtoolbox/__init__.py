"""PR Toolbox: generate pull request descriptions from GitHub PR metadata."""

__version__ = "0.1.0"
