import numpy as np
import pytest
from PIL import Image

from renderer.image_writer import write_image, write_ppm


@pytest.fixture
def pixels():
    grid = np.zeros((2, 3, 3), dtype=np.uint8)
    grid[0, 0] = (255, 0, 0)
    grid[1, 2] = (10, 20, 30)
    return grid


def test_png_round_trip(tmp_path, pixels):
    path = write_image(str(tmp_path / "out.png"), pixels)
    with Image.open(path) as img:
        assert img.size == (3, 2)
        assert img.mode == "RGB"
        assert np.array_equal(np.asarray(img), pixels)


def test_missing_extension_defaults_to_png(tmp_path, pixels):
    path = write_image(str(tmp_path / "render"), pixels)
    assert path.endswith(".png")
    with Image.open(path) as img:
        assert img.format == "PNG"


def test_ppm(tmp_path, pixels):
    path = write_ppm(str(tmp_path / "out.ppm"), pixels)
    lines = open(path).read().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert lines[3] == "255 0 0"
    assert lines[-1] == "10 20 30"


def test_ppm_by_extension(tmp_path, pixels):
    path = write_image(str(tmp_path / "out.ppm"), pixels)
    assert open(path).readline().strip() == "P3"


def test_unknown_extension(tmp_path, pixels):
    with pytest.raises(ValueError, match="Cannot write image"):
        write_image(str(tmp_path / "out.notaformat"), pixels)
