"""Ollama availability checks.

The quote analyst talks to a local Ollama server. These helpers let
callers find out, cheaply and without raising, whether the server is up
and the requested model has been pulled before any generation starts.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_URL = "http://localhost:11434"


class OllamaHealthCheck:
    """Check Ollama server availability and model presence.

    All methods swallow connection problems and report them as
    "unavailable", so they are safe to use in conditionals.

    Attributes:
        base_url: Base URL of the Ollama server.
        timeout: Request timeout in seconds.

    Example:
        >>> health = OllamaHealthCheck()
        >>> if await health.has_model("llama3.2"):
        ...     ...
    """

    def __init__(
        self,
        base_url: str = DEFAULT_OLLAMA_URL,
        timeout: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _get_tags(self) -> httpx.Response | None:
        """GET /api/tags, or None when the server cannot be reached."""
        try:
            async with httpx.AsyncClient() as client:
                return await client.get(
                    f"{self.base_url}/api/tags",
                    timeout=self.timeout,
                )
        except httpx.ConnectError:
            logger.debug("Could not connect to Ollama at %s", self.base_url)
        except httpx.TimeoutException:
            logger.debug("Timeout connecting to Ollama at %s", self.base_url)
        except httpx.RequestError as e:
            logger.debug("Request error talking to Ollama: %s", e)
        return None

    async def is_available(self) -> bool:
        """True if the server answers /api/tags with HTTP 200."""
        response = await self._get_tags()
        if response is None:
            return False
        if response.status_code != 200:
            logger.debug("Ollama server returned status %s", response.status_code)
            return False
        return True

    async def get_available_models(self) -> list[str]:
        """Names of all installed models; empty if the server is unavailable."""
        response = await self._get_tags()
        if response is None or response.status_code != 200:
            return []
        try:
            models = response.json().get("models", [])
            return [m.get("name", "") for m in models if m.get("name")]
        except (ValueError, AttributeError, TypeError) as e:
            logger.debug("Error parsing Ollama model list: %s", e)
            return []

    async def has_model(self, model_name: str) -> bool:
        """Check whether model_name is installed.

        A bare name matches any tag of it, so "llama3.2" matches
        "llama3.2:latest".
        """
        for name in await self.get_available_models():
            if name == model_name or name.startswith(f"{model_name}:"):
                logger.debug("Found model: %s", name)
                return True
        logger.debug("Model '%s' not found on %s", model_name, self.base_url)
        return False


def check_ollama_sync(
    base_url: str = DEFAULT_OLLAMA_URL,
    model_name: str | None = None,
) -> tuple[bool, str]:
    """Synchronous readiness check for CLI use.

    Returns:
        Tuple of (ready, message).
    """
    import asyncio

    async def _check() -> tuple[bool, str]:
        health = OllamaHealthCheck(base_url=base_url)
        if not await health.is_available():
            return False, f"Ollama server not available at {base_url}"

        if model_name and not await health.has_model(model_name):
            return False, (
                f"Model '{model_name}' not found. Run: ollama pull {model_name}"
            )

        return True, "Ollama ready"

    return asyncio.run(_check())
