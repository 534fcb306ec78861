"""Tests for the roundimage FastAPI endpoints."""

import io

from fastapi.testclient import TestClient
from PIL import Image

from roundimage.main import MAX_UPLOAD_BYTES, app

client = TestClient(app)


def _png(width: int = 64, height: int = 48, color=(0, 0, 255)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def _post_render(data: bytes, content_type: str = "image/png", **fields):
    form = {"width": "100", "height": "100"}
    form.update({k: str(v) for k, v in fields.items()})
    return client.post(
        "/render",
        files={"file": ("source.png", data, content_type)},
        data=form,
    )


class TestHealthEndpoint:
    def test_health_returns_200(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["service"] == "roundimage"

    def test_health_includes_version(self):
        resp = client.get("/health")
        assert "version" in resp.json()


class TestRenderEndpoint:
    def test_render_returns_png(self):
        resp = _post_render(_png())
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content[:4] == b"\x89PNG"

    def test_render_respects_view_size(self):
        resp = _post_render(_png(), width=120, height=80)
        img = Image.open(io.BytesIO(resp.content))
        assert img.size == (120, 80)
        assert img.mode == "RGBA"
        assert img.getpixel((60, 40)) == (0, 0, 255, 255)
        assert img.getpixel((0, 0))[3] == 0

    def test_render_with_border(self):
        resp = _post_render(_png(), border_width=10, border_color="#FF0000")
        assert resp.status_code == 200
        img = Image.open(io.BytesIO(resp.content))
        assert img.getpixel((93, 50)) == (255, 0, 0, 255)
        assert img.getpixel((50, 50)) == (0, 0, 255, 255)

    def test_invalid_border_color_returns_422(self):
        resp = _post_render(_png(), border_color="bogus")
        assert resp.status_code == 422

    def test_signed_border_color_returns_422(self):
        resp = _post_render(_png(), border_color="#-FFFFF")
        assert resp.status_code == 422

    def test_negative_border_returns_422(self):
        resp = _post_render(_png(), border_width=-1)
        assert resp.status_code == 422

    def test_size_out_of_range_returns_422(self):
        assert _post_render(_png(), width=0).status_code == 422
        assert _post_render(_png(), height=5000).status_code == 422

    def test_missing_size_returns_422(self):
        resp = client.post(
            "/render",
            files={"file": ("source.png", _png(), "image/png")},
        )
        assert resp.status_code == 422

    def test_unsupported_type_returns_422(self):
        resp = _post_render(b"hello", content_type="text/plain")
        assert resp.status_code == 422

    def test_undecodable_image_renders_empty_view(self):
        resp = _post_render(b"not really a png")
        assert resp.status_code == 200
        img = Image.open(io.BytesIO(resp.content))
        assert img.getbbox() is None

    def test_too_large_returns_413(self):
        resp = _post_render(b"\x00" * (MAX_UPLOAD_BYTES + 1))
        assert resp.status_code == 413

    def test_render_is_deterministic(self):
        first = _post_render(_png(), border_width=4)
        second = _post_render(_png(), border_width=4)
        assert first.content == second.content
