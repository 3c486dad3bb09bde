"""Shared fixtures: fake Workers AI transport, sample images, config."""

import io
import json
from collections.abc import Callable

import httpx
import pytest
from PIL import Image

from ailyze import api
from ailyze.config import AilyzeConfig, CloudinaryConfig


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (2, 2), color=(255, 0, 0)).save(buf, format=fmt)
    return buf.getvalue()


_PNG_BYTES = _image_bytes("PNG")
_JPEG_BYTES = _image_bytes("JPEG")


class FakeWorkersAI:
    """Records requests and answers them with a per-test handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def _image_response(data: bytes = _PNG_BYTES, content_type: str = "image/png") -> httpx.Response:
    return httpx.Response(200, content=data, headers={"content-type": content_type})


def _text_response(text: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={"result": {"response": text}, "success": True, "errors": [], "messages": []},
    )


@pytest.fixture
def png_bytes() -> bytes:
    return _PNG_BYTES


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _JPEG_BYTES


@pytest.fixture
def image_response() -> Callable[..., httpx.Response]:
    return _image_response


@pytest.fixture
def text_response() -> Callable[[str], httpx.Response]:
    return _text_response


@pytest.fixture
def fake_ai() -> Callable[..., FakeWorkersAI]:
    return FakeWorkersAI


@pytest.fixture
def config() -> AilyzeConfig:
    return AilyzeConfig(cloudflare_api_key="k", cloudflare_account_id="a")


@pytest.fixture
def cloudinary_config() -> AilyzeConfig:
    return AilyzeConfig(
        cloudflare_api_key="k",
        cloudflare_account_id="a",
        cloudinary_config=CloudinaryConfig(cloud_name="demo", api_key="ck", api_secret="cs"),
    )


@pytest.fixture(autouse=True)
def reset_global_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(api, "_client", None)
