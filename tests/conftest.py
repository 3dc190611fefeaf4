import pytest
from PIL import Image


def _save_image(path, size=(8, 6), color=(255, 0, 0, 255), mode="RGBA"):
    """Write a solid-colour image and return its path."""
    img = Image.new(mode, size, color if mode == "RGBA" else color[:3])
    img.save(str(path))
    return path


@pytest.fixture
def make_image():
    return _save_image


@pytest.fixture
def image_dir(tmp_path):
    """Directory with three preview images, out of name order on disk."""
    d = tmp_path / "images"
    d.mkdir()
    _save_image(d / "zebra_preview.png", (40, 20), (0, 0, 0, 255))
    _save_image(d / "apple_preview.png", (20, 40), (255, 0, 0, 255))
    _save_image(d / "moon_preview.jpg", (30, 30), (200, 200, 200), mode="RGB")
    (d / "notes.txt").write_text("not an image")
    return d
