"""PR description generation through an OpenAI-compatible chat API."""

import logging
from typing import Any

import openai
from openai import OpenAI

from prtoolbox.config import OpenAIConfig, is_placeholder
from prtoolbox.deadline import Deadline, DeadlineExceeded
from prtoolbox.prompt import SYSTEM_PROMPT

LOG = logging.getLogger("prtoolbox.generator")


class GenerationError(Exception):
    """Base class for description generation failures."""

    pass


class ConfigurationError(GenerationError):
    """API key missing; the generator cannot be constructed."""

    pass


class GenerationFailedError(GenerationError):
    """The completion call failed; cause holds the upstream error."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"generation failed: {cause}")
        self.cause = cause


class EmptyResponseError(GenerationError):
    """The completion call succeeded but returned no choices."""

    def __init__(self) -> None:
        super().__init__("no response from language model")


class DescriptionGenerator:
    """Sends the built prompt with a fixed system role and returns the first
    completion verbatim.

    client may be injected (tests, custom transports); otherwise an OpenAI
    client is created from config. No retries are attempted.
    """

    def __init__(self, config: OpenAIConfig, client: Any = None, api_key: str | None = None) -> None:
        key = api_key or config.api_key
        if not key or is_placeholder(key):
            raise ConfigurationError("OpenAI API key not configured")
        self.config = config
        self._client = client or OpenAI(
            api_key=key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0,
        )

    def generate(self, prompt: str, deadline: Deadline | None = None) -> str:
        """Return the model's description for prompt.

        Raises:
            GenerationFailedError: API error or deadline passed
            EmptyResponseError: zero choices returned
        """
        timeout = self.config.timeout
        if deadline is not None:
            try:
                deadline.check()
            except DeadlineExceeded as e:
                raise GenerationFailedError(e) from e
            timeout = deadline.timeout(self.config.timeout)

        try:
            resp = self._client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                timeout=timeout,
            )
        except openai.OpenAIError as e:
            LOG.error("OpenAI API error: %s", e)
            raise GenerationFailedError(e) from e

        if not resp.choices:
            raise EmptyResponseError()
        return resp.choices[0].message.content or ""
