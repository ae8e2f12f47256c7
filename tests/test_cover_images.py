"""Tests for the cover image store."""

import io
from unittest.mock import MagicMock

import pytest

from audio_works.files.cover_images import CoverImageStore


@pytest.fixture
def image_dir(tmp_path):
    path = tmp_path / "covers"
    path.mkdir()
    return path


@pytest.fixture
def jpeg_bytes():
    return b"\xff\xd8\xff\xe0JPEG_DATA" + bytes(range(256)) * 400


class TestImagePath:
    def test_string_code(self, image_dir):
        store = CoverImageStore(image_dir)

        assert store.image_path("123456") == image_dir / "RJ123456.jpg"

    def test_int_code_zero_padded(self, image_dir):
        store = CoverImageStore(image_dir)

        assert store.image_path(1234) == image_dir / "RJ001234.jpg"

    @pytest.mark.parametrize(
        "code", ["../x", "../../etc/passwd", "12345", "1234567", "12345a", "", -1, 1_000_000]
    )
    def test_invalid_code_rejected(self, image_dir, code):
        with pytest.raises(ValueError, match="Invalid work code"):
            CoverImageStore(image_dir).image_path(code)

    def test_save_invalid_code_writes_nothing(self, tmp_path, image_dir):
        """Codes cannot steer the file outside the image directory."""
        store = CoverImageStore(image_dir)

        with pytest.raises(ValueError):
            store.save(io.BytesIO(b"data"), "../x")

        assert list(image_dir.iterdir()) == []
        assert not (tmp_path / "x.jpg").exists()
        assert not (tmp_path / "RJ..").exists()

    def test_from_config(self, library_config):
        store = CoverImageStore.from_config(library_config)

        assert store.image_dir == library_config.image_dir


class TestSave:
    def test_save_writes_stream(self, image_dir, jpeg_bytes):
        store = CoverImageStore(image_dir)

        path = store.save(io.BytesIO(jpeg_bytes), "123456")

        assert path == image_dir / "RJ123456.jpg"
        assert path.read_bytes() == jpeg_bytes
        assert [p.name for p in image_dir.iterdir()] == ["RJ123456.jpg"]

    def test_save_overwrites(self, image_dir):
        store = CoverImageStore(image_dir)
        store.save(io.BytesIO(b"old image data that is longer"), "000001")

        store.save(io.BytesIO(b"new"), "000001")

        assert store.image_path("000001").read_bytes() == b"new"

    def test_save_keeps_jpg_name_for_other_formats(self, image_dir):
        store = CoverImageStore(image_dir)

        path = store.save(io.BytesIO(b"\x89PNG\r\n\x1a\n"), "000002")

        assert path.suffix == ".jpg"

    def test_save_read_error_propagates(self, image_dir):
        stream = MagicMock()
        stream.read.side_effect = OSError("stream broke")

        with pytest.raises(OSError, match="stream broke"):
            CoverImageStore(image_dir).save(stream, "000003")

    def test_save_missing_directory(self, tmp_path):
        store = CoverImageStore(tmp_path / "missing")

        with pytest.raises(FileNotFoundError):
            store.save(io.BytesIO(b"data"), "000004")


class TestDelete:
    def test_save_then_delete(self, image_dir, jpeg_bytes):
        store = CoverImageStore(image_dir)
        store.save(io.BytesIO(jpeg_bytes), "123456")
        assert store.exists("123456")

        store.delete("123456")

        assert not store.exists("123456")
        assert not (image_dir / "RJ123456.jpg").exists()

    def test_repeated_delete_fails(self, image_dir):
        store = CoverImageStore(image_dir)
        store.save(io.BytesIO(b"data"), "123456")
        store.delete("123456")

        with pytest.raises(FileNotFoundError):
            store.delete("123456")

    def test_delete_leaves_other_covers(self, image_dir):
        store = CoverImageStore(image_dir)
        store.save(io.BytesIO(b"a"), "000001")
        store.save(io.BytesIO(b"b"), "000002")

        store.delete(1)

        assert not store.exists("000001")
        assert store.exists("000002")
