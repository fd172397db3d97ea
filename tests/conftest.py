import pytest

from civicly.analysis.models import UploadedImage

# Smallest valid PNG header plus padding; content is never decoded.
_PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture()
def sample_image_bytes() -> bytes:
    return _PNG_BYTES


@pytest.fixture()
def sample_image(sample_image_bytes: bytes) -> UploadedImage:
    return UploadedImage(
        content=sample_image_bytes,
        media_type="image/png",
        filename="street.png",
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of Settings() in tests."""
    for name in (
        "PINNING_PROVIDER",
        "CLASSIFICATION_PROVIDER",
        "LEDGER_RPC_URL",
        "LEDGER_CONTRACT_ADDRESS",
        "LOG_LEVEL",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
