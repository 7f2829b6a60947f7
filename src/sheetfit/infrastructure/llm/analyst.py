"""Quote history analysis with a rule-based fallback.

QuoteAnalyst asks a local LLM for a written review of recent quotes.
When Ollama is not running, the model is missing, generation times out
or fails, it falls back to a deterministic summary built from the same
thresholds the prompt asks the model to apply.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from sheetfit.infrastructure.llm.analysis_agent import (
    DEFAULT_MODEL,
    run_quote_analysis,
)
from sheetfit.infrastructure.llm.ollama_client import (
    DEFAULT_OLLAMA_URL,
    OllamaHealthCheck,
)
from sheetfit.infrastructure.llm.prompts import (
    HIGH_VOLUME_THRESHOLD,
    LOW_MARGIN_THRESHOLD,
)
from sheetfit.infrastructure.quote_store import QuoteRecord

logger = logging.getLogger(__name__)


def _dims(record: QuoteRecord) -> str:
    return f"{record.length_cm:g}x{record.width_cm:g}x{record.height_cm:g} cm"


def summarize_quotes(records: Sequence[QuoteRecord]) -> str:
    """Rule-based Markdown review of quote history."""
    if not records:
        raise ValueError("No quotes to analyze")

    avg_margin = sum(r.margin_percent for r in records) / len(records)
    total_profit = sum(r.total_project_profit for r in records)
    low_margin = [r for r in records if r.margin_percent < LOW_MARGIN_THRESHOLD]
    volume_risk = [r for r in low_margin if r.volume >= HIGH_VOLUME_THRESHOLD]

    lines = [
        f"**Summary**: {len(records)} quotes reviewed, average margin "
        f"{avg_margin:.1f}%, projected profit {total_profit:,.2f}.",
        "",
        "**Alerts**:",
    ]
    if low_margin:
        for r in low_margin:
            lines.append(
                f"- {_dims(r)} (grade {r.material_type}, {r.volume} units) "
                f"is quoted at a {r.margin_percent:g}% margin, below "
                f"{LOW_MARGIN_THRESHOLD:g}%."
            )
    else:
        lines.append(f"- No margins below {LOW_MARGIN_THRESHOLD:g}%.")

    lines.extend(["", "**Opportunities**:"])
    if volume_risk:
        for r in volume_risk:
            lines.append(
                f"- {_dims(r)}: {r.volume} units at {r.margin_percent:g}% margin; "
                "consider tiered volume pricing or renegotiating board cost."
            )
    best = max(records, key=lambda r: r.total_project_profit)
    lines.append(
        f"- Most profitable quote: {_dims(best)} with "
        f"{best.total_project_profit:,.2f} projected profit."
    )
    return "\n".join(lines)


class QuoteAnalyst:
    """LLM-backed quote reviewer with automatic fallback.

    Attributes:
        ollama_url: Ollama server URL.
        model: Ollama model name without prefix.
        timeout: Generation timeout in seconds.
    """

    def __init__(
        self,
        ollama_url: str = DEFAULT_OLLAMA_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
    ) -> None:
        self.ollama_url = ollama_url
        self.model = model
        self.timeout = timeout
        self.health_check = OllamaHealthCheck(ollama_url)

    async def analyze(self, records: Sequence[QuoteRecord]) -> str:
        """Review quotes, returning Markdown.

        Raises:
            ValueError: If records is empty.
        """
        if not records:
            raise ValueError("No quotes to analyze")

        if not await self.health_check.is_available():
            logger.info("Ollama unavailable, using rule-based summary")
            return self._fallback(records, "Ollama server not available")

        if not await self.health_check.has_model(self.model):
            logger.warning(
                "Model '%s' not found. Run: ollama pull %s", self.model, self.model
            )
            return self._fallback(records, f"Model '{self.model}' not available")

        try:
            return await asyncio.wait_for(
                run_quote_analysis(
                    records, model=self.model, ollama_url=self.ollama_url
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Quote analysis timed out after %ss", self.timeout)
            return self._fallback(
                records, f"Generation timed out after {self.timeout}s"
            )
        except Exception as e:
            logger.error("Unexpected error during quote analysis: %s", e)
            return self._fallback(records, f"Unexpected error: {type(e).__name__}")

    def analyze_sync(self, records: Sequence[QuoteRecord]) -> str:
        """Synchronous wrapper for analyze()."""
        return asyncio.run(self.analyze(records))

    def _fallback(self, records: Sequence[QuoteRecord], reason: str) -> str:
        header = (
            "<!-- Generated using rule-based fallback -->\n"
            f"<!-- Reason: {reason} -->\n\n"
        )
        return header + summarize_quotes(records)
