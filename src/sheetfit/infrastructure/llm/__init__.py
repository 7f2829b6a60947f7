"""LLM integration for quote history analysis.

Uses pydantic-ai with Ollama as the local inference backend.

Submodules:
    ollama_client: Health check utilities for Ollama
    prompts: System prompt and prompt builders
    analysis_agent: pydantic-ai agent definition
    analyst: QuoteAnalyst with rule-based fallback
"""

from __future__ import annotations

from .ollama_client import DEFAULT_OLLAMA_URL, OllamaHealthCheck, check_ollama_sync
from .prompts import (
    ANALYST_SYSTEM_PROMPT,
    HIGH_VOLUME_THRESHOLD,
    LOW_MARGIN_THRESHOLD,
    build_analysis_prompt,
    simplify_record,
)
from .analysis_agent import DEFAULT_MODEL, create_analysis_agent, run_quote_analysis
from .analyst import QuoteAnalyst, summarize_quotes

__all__ = [
    # Ollama client
    "DEFAULT_OLLAMA_URL",
    "OllamaHealthCheck",
    "check_ollama_sync",
    # Prompts
    "ANALYST_SYSTEM_PROMPT",
    "HIGH_VOLUME_THRESHOLD",
    "LOW_MARGIN_THRESHOLD",
    "build_analysis_prompt",
    "simplify_record",
    # Agent
    "DEFAULT_MODEL",
    "create_analysis_agent",
    "run_quote_analysis",
    # Analyst
    "QuoteAnalyst",
    "summarize_quotes",
]
