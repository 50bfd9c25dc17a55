"""
LLM provider abstraction.

Provides a provider-agnostic interface for generation calls. Every call is a
single attempt: transport failures and rejected requests surface immediately
as LLMRequestError.

Gemini is the default provider and talks to the REST endpoint with httpx.
The OpenAI and Anthropic SDKs are imported lazily, only when selected.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from reviewer.utils.settings import load_settings


class LLMRequestError(RuntimeError):
    """Raised when a generation request fails or is rejected by the provider."""


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses must:
    - Set _provider_prefix class attribute (e.g., "gemini", "openai")
    - Implement generate() as one API call that raises LLMRequestError on failure
    - Call update_model(model) in __init__ to set model and name
    """

    _provider_prefix: str

    name: str
    model: str

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        """Send one prompt and return the model's raw text answer."""


class GeminiProvider(LLMProvider):
    """Google Gemini provider over the generateContent REST endpoint."""

    _provider_prefix = "gemini"

    def __init__(
        self,
        model: str = None,
        api_key: str = None,
        endpoint: str = None,
        client: httpx.Client = None,
    ):
        settings = load_settings()
        if api_key is None:
            api_key = settings.gemini.api_key or ""
        if not api_key:
            # Not fatal: the endpoint rejects the request and the caller reports it
            logger.warning("GEMINI_API_KEY is not set; requests will be rejected")

        self._api_key = api_key
        self._endpoint = endpoint or settings.gemini.endpoint
        self.client = client or httpx.Client(timeout=None)
        self.update_model(model or settings.gemini.model)

    @property
    def url(self) -> str:
        return self._endpoint.format(model=self.model)

    def generate(self, prompt: str) -> LLMResponse:
        try:
            response = self.client.post(
                self.url,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self._api_key,
                },
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise LLMRequestError(
                f"Gemini rejected the request: status={e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise LLMRequestError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise LLMRequestError(f"Gemini returned a non-JSON body: {e}") from e

        usage = data.get("usageMetadata") if isinstance(data, dict) else None
        usage = usage if isinstance(usage, dict) else {}
        return LLMResponse(
            content=candidate_text(data),
            model=self.model,
            input_tokens=usage.get("promptTokenCount"),
            output_tokens=usage.get("candidatesTokenCount"),
        )


def candidate_text(data: Any) -> str:
    """
    Pull the first candidate's text out of a generateContent envelope.

    Returns an empty string when any level of the envelope is missing.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider."""

    _provider_prefix = "openai"

    def __init__(self, model: str = None, api_key: str = None):
        # Lazy import - openai SDK is heavy, only load if this provider is used
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install openai")

        settings = load_settings()
        if api_key is None:
            api_key = settings.openai.api_key or ""

        self.client = openai.OpenAI(api_key=api_key)
        self._request_error = openai.OpenAIError
        self.update_model(model or settings.openai.model)

    def generate(self, prompt: str) -> LLMResponse:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except self._request_error as e:
            raise LLMRequestError(f"OpenAI request failed: {e}") from e

        # choices may be empty and usage may be None on filtered or partial responses
        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=getattr(message, "content", None) or "",
            model=self.model,
            input_tokens=getattr(usage, "prompt_tokens", None),
            output_tokens=getattr(usage, "completion_tokens", None),
        )


class AnthropicProvider(LLMProvider):
    """Anthropic Claude messages provider."""

    _provider_prefix = "anthropic"

    def __init__(self, model: str = None, api_key: str = None):
        # Lazy import - anthropic SDK is heavy, only load if this provider is used
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install anthropic")

        settings = load_settings()
        if api_key is None:
            api_key = settings.anthropic.api_key or ""

        self.client = anthropic.Anthropic(api_key=api_key)
        self._request_error = anthropic.AnthropicError
        self._max_tokens = int(settings.anthropic.max_tokens)
        self.update_model(model or settings.anthropic.model)

    def generate(self, prompt: str) -> LLMResponse:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except self._request_error as e:
            raise LLMRequestError(f"Anthropic request failed: {e}") from e

        blocks = getattr(response, "content", None) or []
        usage = getattr(response, "usage", None)
        return LLMResponse(
            content="".join(
                block.text for block in blocks if getattr(block, "type", None) == "text"
            ),
            model=self.model,
            input_tokens=getattr(usage, "input_tokens", None),
            output_tokens=getattr(usage, "output_tokens", None),
        )


# --- Provider Factory ---

PROVIDERS = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


def get_provider(provider_name: str = None, model: str = None) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        provider_name: "gemini", "openai" or "anthropic" (default: llm.provider setting)
        model: Model name (default: provider-specific setting)

    Returns:
        LLMProvider instance
    """
    if provider_name is None:
        provider_name = str(load_settings().llm.provider)
    provider_name = provider_name.lower().strip()

    if provider_name not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {provider_name}. Use one of: {', '.join(PROVIDERS)}"
        )
    return PROVIDERS[provider_name](model=model)
