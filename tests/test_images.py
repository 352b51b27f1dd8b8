"""Tests for toolbelt.images module."""

from pathlib import Path

import pytest

from toolbelt.images import (
    find_images,
    parse_size,
    resize_images,
    resized_name,
)


@pytest.fixture
def image_dir(temp_dir):
    """A directory with a few images and other files."""
    for name in ["a.jpg", "b.PNG", "c.jpeg", "notes.txt", "d.gif"]:
        (temp_dir / name).write_bytes(b"x")
    (temp_dir / "sub.jpg").mkdir()
    return temp_dir


class TestParseSize:
    """Tests for parse_size function."""

    def test_valid(self):
        """Test a normal size."""
        assert parse_size("2560x1080") == "2560x1080"
        assert parse_size(" 0800x600 ") == "800x600"

    @pytest.mark.parametrize("size", ["2560", "2560X1080", "0x100", "axb", "100x"])
    def test_invalid(self, size):
        """Test rejected sizes."""
        with pytest.raises(ValueError):
            parse_size(size)


class TestResizedName:
    """Tests for resized_name function."""

    def test_keeps_extension(self):
        """Test the output filename."""
        assert resized_name(Path("beach.day.jpg"), "2560x1080") == "beach.day___resized_to_2560x1080.jpg"


class TestFindImages:
    """Tests for find_images function."""

    def test_only_supported_files(self, image_dir):
        """Test extension filtering and ordering."""
        assert [p.name for p in find_images(image_dir)] == ["a.jpg", "b.PNG", "c.jpeg"]


class TestResizeImages:
    """Tests for resize_images function."""

    def test_converts_and_moves_originals(self, image_dir, mocker):
        """Test a full run with one image already the right size."""
        sizes = {"a.jpg": "1920x1080", "b.PNG": "2560x1080", "c.jpeg": "800x600"}

        def fake_run(args):
            if args[0] == "identify":
                return sizes[Path(args[-1]).name]
            Path(args[-1]).write_bytes(b"resized")
            return ""

        mock_run = mocker.patch("toolbelt.images.run_command", side_effect=fake_run)

        results = resize_images(image_dir, "2560x1080")

        assert [r.skipped for r in results] == [False, True, False]
        assert (image_dir / "originals" / "a.jpg").exists()
        assert (image_dir / "originals" / "c.jpeg").exists()
        assert (image_dir / "b.PNG").exists()
        assert (image_dir / "a___resized_to_2560x1080.jpg").exists()
        assert not (image_dir / "a.jpg").exists()

        convert_args = [c.args[0] for c in mock_run.call_args_list if c.args[0][0] == "convert"][0]
        assert convert_args == [
            "convert", str(image_dir / "a.jpg"),
            "-resize", "2560x1080",
            "-background", "black",
            "-gravity", "center",
            "-extent", "2560x1080",
            str(image_dir / "a___resized_to_2560x1080.jpg"),
        ]

    def test_dry_run_changes_nothing(self, image_dir, mocker):
        """Test that a dry run only reads dimensions."""
        mock_run = mocker.patch("toolbelt.images.run_command", return_value="100x100")
        seen = []

        results = resize_images(image_dir, "2560x1080", dry_run=True, on_result=seen.append)

        assert seen == results
        assert all(r.target is not None and not r.converted for r in results)
        assert all(c.args[0][0] == "identify" for c in mock_run.call_args_list)
        assert not (image_dir / "originals").exists()
        assert (image_dir / "a.jpg").exists()

    def test_invalid_size(self, image_dir):
        """Test that an invalid size is rejected before any work."""
        with pytest.raises(ValueError):
            resize_images(image_dir, "big")
