from civicly.classification.base import BaseClassifier
from civicly.classification.classifier import IssueClassifier
from civicly.classification.example_client_adapter import ExampleClientAdapter
from civicly.classification.gemini_client_adapter import GeminiClientAdapter
from civicly.classification.openai_client_adapter import OpenAIClientAdapter
from civicly.config.settings import Settings


class ClassifierFactory:
    """Creates the configured issue classifier."""

    PROVIDERS = ("example", "gemini", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseClassifier:
        """Create a configured classifier from application settings."""
        provider = settings.classification_provider.lower()
        if provider == "example":
            return IssueClassifier(client=ExampleClientAdapter(), model="example")
        if provider == "gemini":
            client = GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                timeout_seconds=settings.gemini_timeout_seconds,
                base_url=settings.gemini_base_url,
            )
            return IssueClassifier(client=client, model=settings.gemini_model_name)
        if provider in ("openai", "openai_compatible"):
            client = OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=cls._resolve_openai_base_url(provider, settings),
            )
            return IssueClassifier(client=client, model=settings.openai_model_name)
        raise ValueError(
            f"Unknown classification provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def _resolve_openai_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.openai_base_url
        url = (settings.openai_base_url or "").strip()
        if not url:
            raise ValueError(
                "openai_base_url is required for classification_provider=openai_compatible"
            )
        return url
