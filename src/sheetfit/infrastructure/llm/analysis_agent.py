"""pydantic-ai agent for quote history analysis.

The agent runs against Ollama's OpenAI-compatible endpoint and returns
free-form Markdown text.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from sheetfit.infrastructure.llm.ollama_client import DEFAULT_OLLAMA_URL
from sheetfit.infrastructure.llm.prompts import (
    ANALYST_SYSTEM_PROMPT,
    build_analysis_prompt,
)
from sheetfit.infrastructure.quote_store import QuoteRecord

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3.2"


def _create_ollama_model(model_name: str, ollama_url: str) -> OpenAIChatModel:
    """Create a chat model bound to Ollama's /v1 endpoint."""
    if model_name.startswith("ollama:"):
        model_name = model_name[len("ollama:"):]

    base_url = ollama_url.rstrip("/")
    if not base_url.endswith("/v1"):
        base_url = f"{base_url}/v1"

    # Ollama ignores the key but the OpenAI client requires one.
    provider = OpenAIProvider(base_url=base_url, api_key="ollama")
    return OpenAIChatModel(model_name, provider=provider)


def create_analysis_agent(
    model: str = DEFAULT_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
) -> Agent[None, str]:
    """Create an agent that turns quote history into a Markdown report."""
    return Agent(
        _create_ollama_model(model, ollama_url),
        output_type=str,
        system_prompt=ANALYST_SYSTEM_PROMPT,
    )


async def run_quote_analysis(
    records: Sequence[QuoteRecord],
    model: str = DEFAULT_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
    agent: Agent[None, str] | None = None,
) -> str:
    """Ask the model to analyze the given quotes.

    Args:
        records: Quotes to analyze, newest first.
        model: Ollama model name.
        ollama_url: Ollama server URL.
        agent: Optional pre-built agent (for testing).

    Raises:
        pydantic_ai.exceptions.UnexpectedModelBehavior: On unusable output.
        httpx.RequestError: On network errors.
    """
    if agent is None:
        agent = create_analysis_agent(model=model, ollama_url=ollama_url)

    prompt = build_analysis_prompt(records)
    logger.debug(
        "Running quote analysis over %d records (%d prompt chars)",
        len(records),
        len(prompt),
    )

    result = await agent.run(prompt)
    return result.output
