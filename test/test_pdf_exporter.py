# test/test_pdf_exporter.py
from __future__ import annotations

import io
import logging

import pytest
import requests
from PIL import Image
from pypdf import PdfReader

import exporters.pdf_exporter as pdf_exporter
from exporters import PalletTagAssembler, load_logo
from models import TextOp


# ---------- tiny response helper ----------
class FakeResp:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content

    def raise_for_status(self):
        if 400 <= self.status_code:
            raise requests.HTTPError(f"HTTP {self.status_code}")


# ---------- logo ----------
def test_load_logo_from_path_keeps_aspect_ratio(logo_file):
    logo = load_logo(str(logo_file))
    assert logo.height == pytest.approx(8)
    assert logo.width == pytest.approx(16)


def test_load_logo_missing_is_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert load_logo(str(tmp_path / "missing.jpeg")) is None
    assert "Could not load logo" in caplog.text


def test_load_logo_not_an_image(tmp_path, caplog):
    path = tmp_path / "logo.jpeg"
    path.write_bytes(b"not an image")
    with caplog.at_level(logging.WARNING):
        assert load_logo(str(path)) is None
    assert "Could not load logo" in caplog.text


@pytest.fixture
def truncated_logo(tmp_path):
    """A PNG whose header is intact but whose pixel data stops halfway."""
    full = tmp_path / "full.png"
    Image.effect_noise((300, 150), 64).save(full)
    data = full.read_bytes()
    path = tmp_path / "truncated.png"
    path.write_bytes(data[: len(data) // 2])
    return path


def test_load_logo_truncated_pixel_data(truncated_logo, caplog):
    with caplog.at_level(logging.WARNING):
        assert load_logo(str(truncated_logo)) is None
    assert "Could not load logo" in caplog.text


def test_truncated_logo_still_renders(truncated_logo, sample_records):
    document = PalletTagAssembler(logo_source=str(truncated_logo)).build(sample_records, "t.xlsx")
    reader = PdfReader(io.BytesIO(document.render()))
    assert len(reader.pages) == 2


def test_load_logo_from_url(monkeypatch, logo_file):
    calls = {}

    def fake_get(url, timeout=None):
        calls["url"] = url
        return FakeResp(200, logo_file.read_bytes())

    monkeypatch.setattr(pdf_exporter.requests, "get", fake_get)
    logo = load_logo("https://example.com/logo.png")
    assert calls["url"] == "https://example.com/logo.png"
    assert logo.width == pytest.approx(16)


def test_load_logo_url_failure(monkeypatch, caplog):
    monkeypatch.setattr(pdf_exporter.requests, "get", lambda url, timeout=None: FakeResp(404))
    with caplog.at_level(logging.WARNING):
        assert load_logo("https://example.com/logo.png") is None
    assert "HTTP 404" in caplog.text


def test_load_logo_none():
    assert load_logo(None) is None


# ---------- assembler ----------
def test_build_no_records_is_noop(caplog):
    assembler = PalletTagAssembler(logo_source=None)
    with caplog.at_level(logging.WARNING):
        assert assembler.build([], "tags.xlsx") is None
    assert "No data rows" in caplog.text


@pytest.mark.parametrize("count", [1, 3])
def test_page_count_matches_records(sample_record, count):
    records = [dict(sample_record, **{"Pallet No.": i + 1}) for i in range(count)]
    document = PalletTagAssembler(logo_source=None).build(records, "TAG - CONT # 2.xlsx")

    assert document.page_count == count
    pallet_values = [
        [op.text for op in page
         if isinstance(op, TextOp) and op.x == pytest.approx(document.ctx.right_col + 36)]
        for page in document.pages
    ]
    assert pallet_values == [[str(i + 1)] for i in range(count)]


def test_logo_loaded_once(monkeypatch, sample_records):
    calls = []

    def fake_load(source):
        calls.append(source)
        return None

    monkeypatch.setattr(pdf_exporter, "load_logo", fake_load)
    assembler = PalletTagAssembler(logo_source="logo.jpeg")
    assembler.build(sample_records, "a.xlsx")
    assembler.build(sample_records, "b.xlsx")
    assert calls == ["logo.jpeg"]


# ---------- rendering ----------
def test_render_page_count_and_size(sample_records, logo_file):
    document = PalletTagAssembler(logo_source=str(logo_file)).build(sample_records, "tags.xlsx")
    reader = PdfReader(io.BytesIO(document.render()))

    assert len(reader.pages) == 2
    box = reader.pages[0].mediabox
    assert float(box.width) == pytest.approx(152.4 / 25.4 * 72)
    assert float(box.height) == pytest.approx(101.6 / 25.4 * 72)
    assert "PALLET TAG" in reader.pages[1].extract_text()


def test_save_replaces_extension(tmp_path, sample_records):
    source = tmp_path / "TAG - QUIMIDROGA - CONT # 03.xlsx"
    document = PalletTagAssembler(logo_source=None).build(sample_records, source)

    out_file = document.save()
    assert out_file == tmp_path / "TAG - QUIMIDROGA - CONT # 03.pdf"
    assert out_file.read_bytes().startswith(b"%PDF")

    other = document.save(tmp_path / "out")
    assert other == tmp_path / "out" / "TAG - QUIMIDROGA - CONT # 03.pdf"
    assert len(PdfReader(other).pages) == 2
