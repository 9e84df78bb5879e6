"""Description pipeline: parse URL, fetch PR data, build prompt, generate.

This is the single operation exposed to the serving layer. Errors it
raises:

- ParseError (invalid URL): raised before any network or model call
- GenerationError (generation failed / no response)

Upstream GitHub failures are never raised: the data source degrades to
partial or synthetic data, visible through DescriptionResult.record.source.
"""

import logging

from pydantic import BaseModel

from prtoolbox.config import AppConfig
from prtoolbox.deadline import Deadline
from prtoolbox.generator import ConfigurationError, DescriptionGenerator
from prtoolbox.models import PRRecord
from prtoolbox.prompt import build_prompt
from prtoolbox.sources import PRDataSource, build_pr_source
from prtoolbox.url_parser import parse_pr_url

LOG = logging.getLogger("prtoolbox.service")


class DescriptionResult(BaseModel):
    """Generated description plus the record and prompt it was built from."""

    description: str
    record: PRRecord
    prompt: str


class PRDescriptionService:
    """Runs one request end to end; holds no per-request state."""

    def __init__(self, source: PRDataSource, generator: DescriptionGenerator | None = None) -> None:
        self.source = source
        self.generator = generator

    def prepare(self, url: str, deadline: Deadline | None = None) -> tuple[PRRecord, str]:
        """Parse and fetch, returning the record and its prompt (no model call)."""
        pr_url = parse_pr_url(url)
        record = self.source.fetch(pr_url.owner, pr_url.repo, pr_url.number, deadline)
        if record.is_degraded:
            LOG.info(
                "PR %s#%s: %s data (degraded: %s)",
                record.repository,
                record.pr_number,
                record.source.value,
                ", ".join(record.degraded_fields) or record.fallback_reason or "-",
            )
        return record, build_prompt(record)

    def describe(self, url: str, deadline: Deadline | None = None) -> DescriptionResult:
        if self.generator is None:
            raise ConfigurationError("description generator not configured")
        record, prompt = self.prepare(url, deadline)
        description = self.generator.generate(prompt, deadline)
        return DescriptionResult(description=description, record=record, prompt=prompt)

    def generate_description(self, url: str, deadline: Deadline | None = None) -> str:
        """Return only the description text."""
        return self.describe(url, deadline).description


def build_service(config: AppConfig) -> PRDescriptionService:
    """Wire data source and generator from config.

    Raises:
        ConfigurationError: OpenAI API key not configured
    """
    generator = DescriptionGenerator(config.openai, api_key=config.openai_api_key_resolved)
    return PRDescriptionService(build_pr_source(config), generator)
