from unittest.mock import patch

import pytest

from civicly.config.settings import Settings
from civicly.pinning.example_adapter import ExamplePinningAdapter
from civicly.pinning.factory import PinningClientFactory


class TestPinningClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = PinningClientFactory.create(Settings(pinning_provider="example"))
        assert isinstance(client, ExamplePinningAdapter)
        assert client.pin(b"x", "x.png").startswith("example-")

    def test_uses_pinata_settings(self) -> None:
        settings = Settings(
            pinning_provider="Pinata",
            pinata_api_key="k",
            pinata_secret_api_key="s",
            pinning_timeout_seconds=12,
            pinning_max_attempts=4,
        )
        with patch("civicly.pinning.factory.PinataAdapter") as mock_adapter:
            PinningClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            secret_api_key="s",
            timeout_seconds=12,
            base_url="https://api.pinata.cloud",
            cid_version=1,
            max_attempts=4,
            backoff_seconds=0.5,
        )

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown pinning provider"):
            PinningClientFactory.create(Settings(pinning_provider="s3"))
