import base64
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from civicly.classification.exceptions import ClassificationUnavailableError
from civicly.classification.gemini_client_adapter import GeminiClientAdapter

Handler = Callable[[httpx.Request], httpx.Response]


def _make_adapter(handler: Handler) -> GeminiClientAdapter:
    http_client = httpx.Client(
        base_url="https://gemini.test/v1",
        transport=httpx.MockTransport(handler),
    )
    return GeminiClientAdapter(api_key="g-key", timeout_seconds=5, http_client=http_client)


def _generate(adapter: GeminiClientAdapter) -> str | None:
    return adapter.generate(
        model="gemini-2.5-flash",
        instruction="one word please",
        image_bytes=b"img",
        media_type="image/jpeg",
    )


def _candidate_body(text: Any) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class TestGeminiClientAdapter:
    def test_returns_trimmed_first_candidate_text(self) -> None:
        adapter = _make_adapter(lambda _req: httpx.Response(200, json=_candidate_body(" pothole\n")))
        assert _generate(adapter) == "pothole"

    def test_sends_instruction_and_inline_image(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=_candidate_body("garbage"))

        _generate(_make_adapter(handler))

        request = captured[0]
        assert request.url.path == "/v1/models/gemini-2.5-flash:generateContent"
        assert request.url.params["key"] == "g-key"
        parts = json.loads(request.read())["contents"][0]["parts"]
        assert parts[0] == {"text": "one word please"}
        assert parts[1]["inline_data"] == {
            "data": base64.b64encode(b"img").decode("ascii"),
            "mime_type": "image/jpeg",
        }

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {"parts": []}}]},
            _candidate_body(None),
            ["not", "an", "object"],
        ],
    )
    def test_returns_none_for_malformed_body(self, body: Any) -> None:
        adapter = _make_adapter(lambda _req: httpx.Response(200, json=body))
        assert _generate(adapter) is None

    def test_returns_none_for_non_json_body(self) -> None:
        adapter = _make_adapter(lambda _req: httpx.Response(200, text="oops"))
        assert _generate(adapter) is None

    def test_auth_failure_is_unavailable(self) -> None:
        adapter = _make_adapter(lambda _req: httpx.Response(403, json={"error": "denied"}))
        with pytest.raises(ClassificationUnavailableError, match="403"):
            _generate(adapter)

    def test_network_error_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ClassificationUnavailableError, match="network error"):
            _generate(_make_adapter(handler))

    def test_timeout_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(ClassificationUnavailableError, match="timed out"):
            _generate(_make_adapter(handler))
