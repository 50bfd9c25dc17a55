"""Shared fixtures: an in-memory PDF builder and LLM provider doubles."""

from typing import Callable, List, Optional

import httpx
import pytest

from reviewer.utils.llm import GeminiProvider, LLMProvider, LLMResponse


def build_pdf(pages: List[List[str]]) -> bytes:
    """
    Build a minimal PDF with one Helvetica text line per entry.

    Args:
        pages: For each page, the lines of text to draw top to bottom

    Returns:
        PDF bytes with a valid xref table
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    content_ids = [5 + 2 * i for i in range(len(pages))]

    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }

    for page_id, content_id, lines in zip(page_ids, content_ids, pages):
        ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
        for line in lines:
            escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
            ops.append(f"({escaped}) Tj T*")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")

        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
        ).encode()
        objects[content_id] = (
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += b"%d 0 obj\n" % num + objects[num] + b"\nendobj\n"

    xref_offset = len(out)
    size = len(objects) + 1
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += b"%010d 00000 n \n" % offsets[num]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_offset)
    return bytes(out)


@pytest.fixture
def make_pdf() -> Callable[[List[List[str]]], bytes]:
    return build_pdf


class FakeProvider(LLMProvider):
    """Provider double that returns canned text or raises a canned error."""

    _provider_prefix = "fake"

    def __init__(
        self,
        content: str = "",
        error: Optional[Exception] = None,
        on_generate: Optional[Callable[[], None]] = None,
    ):
        self.content = content
        self.error = error
        self.on_generate = on_generate
        self.prompts: List[str] = []
        self.update_model("test-model")

    def generate(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        if self.on_generate:
            self.on_generate()
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model=self.model)


@pytest.fixture
def fake_provider():
    return FakeProvider


def gemini_envelope(text: str) -> dict:
    return {
        "candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}],
        "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 45},
    }


@pytest.fixture
def gemini_provider():
    """
    Factory for a GeminiProvider whose HTTP traffic goes to a MockTransport.

    Requests are recorded on ``provider.requests``.
    """

    def _make(model_text: str = "", status_code: int = 200, handler=None, api_key="test-key"):
        requests = []

        def default_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=gemini_envelope(model_text))

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return (handler or default_handler)(request)

        client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        provider = GeminiProvider(model="gemini-test", api_key=api_key, client=client)
        provider.requests = requests
        return provider

    return _make
