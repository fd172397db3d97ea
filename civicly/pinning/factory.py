from civicly.config.settings import Settings
from civicly.pinning.base import BasePinningClient
from civicly.pinning.example_adapter import ExamplePinningAdapter
from civicly.pinning.pinata_adapter import PinataAdapter


class PinningClientFactory:
    """Creates the configured pinning adapter."""

    PROVIDERS = ("example", "pinata")

    @classmethod
    def create(cls, settings: Settings) -> BasePinningClient:
        provider = settings.pinning_provider.lower()
        if provider == "example":
            return ExamplePinningAdapter()
        if provider == "pinata":
            return PinataAdapter(
                api_key=settings.pinata_api_key,
                secret_api_key=settings.pinata_secret_api_key,
                timeout_seconds=settings.pinning_timeout_seconds,
                base_url=settings.pinata_base_url,
                cid_version=settings.pinata_cid_version,
                max_attempts=settings.pinning_max_attempts,
                backoff_seconds=settings.pinning_retry_backoff_seconds,
            )
        raise ValueError(
            f"Unknown pinning provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
