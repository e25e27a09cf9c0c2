import pytest
from PIL import Image

from mediatools.pixels import Dimensions, DimensionsError, read_f32, write_f32


def test_read_png_scales_to_unit_range(tmp_path):
    path = tmp_path / "in.png"
    Image.new("RGBA", (3, 2), (255, 0, 255, 0)).save(path)
    dimensions, samples = read_f32(str(path))
    assert dimensions == Dimensions(3, 2)
    assert len(samples) == 3 * 2 * 4
    assert samples[:4] == [1.0, 0.0, 1.0, 0.0]


def test_read_rgb_image_gets_opaque_alpha(tmp_path):
    path = tmp_path / "in.png"
    Image.new("RGB", (2, 2), (0, 255, 0)).save(path)
    _, samples = read_f32(str(path))
    assert samples[3::4] == [1.0] * 4
    assert all(0.0 <= value <= 1.0 for value in samples)


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.jpg"
    dimensions = Dimensions(8, 8)
    pixels = [1.0, 0.0, 0.0, 1.0] * 64
    write_f32(dimensions, pixels, str(path))
    read_dimensions, samples = read_f32(str(path))
    assert read_dimensions == dimensions
    for got, want in zip(samples, pixels):
        assert got == pytest.approx(want, abs=0.08)


def test_written_file_is_jpeg(tmp_path):
    path = tmp_path / "out.img"
    write_f32(Dimensions(4, 4), [0.5] * 64, str(path))
    with Image.open(path) as image:
        assert image.format == "JPEG"


def test_out_of_range_values_are_clamped(tmp_path):
    path = tmp_path / "out.jpg"
    write_f32(Dimensions(8, 8), [2.0, -1.0, 2.0, 1.0] * 64, str(path))
    _, samples = read_f32(str(path))
    assert samples[0] == pytest.approx(1.0, abs=0.08)
    assert samples[1] == pytest.approx(0.0, abs=0.08)


def test_too_few_samples_raise(tmp_path):
    with pytest.raises(DimensionsError):
        write_f32(Dimensions(2, 2), [0.0] * 15, str(tmp_path / "out.jpg"))
    assert not (tmp_path / "out.jpg").exists()


def test_dimensions_equality():
    assert Dimensions(1, 2) == Dimensions(1, 2)
    assert Dimensions(1, 2) != Dimensions(2, 1)