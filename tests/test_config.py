import pytest

from soft_rasterizer.cli import parse_args
from soft_rasterizer.color import BLACK, Color
from soft_rasterizer.config import DEFAULT_SIZE, RenderConfig, RenderMode, parse_dimension
from soft_rasterizer.math_utils import Vec3
from soft_rasterizer.rasterizer import FillStrategy


@pytest.mark.parametrize("text,expected", [
    ("640", 640),
    (" 32 ", 32),
    ("0", DEFAULT_SIZE),
    ("-20", DEFAULT_SIZE),
    ("abc", DEFAULT_SIZE),
    ("12.5", DEFAULT_SIZE),
    (None, DEFAULT_SIZE),
])
def test_parse_dimension(text, expected):
    assert parse_dimension(text) == expected


def test_defaults():
    config = RenderConfig()
    assert (config.width, config.height) == (DEFAULT_SIZE, DEFAULT_SIZE)
    assert config.mode is RenderMode.FLAT
    assert config.fill is FillStrategy.BARYCENTRIC
    assert config.light_vector == Vec3(1, 0, -1)
    assert config.background == BLACK
    assert config.rle
    assert config.model_path == "head_wireframe.obj"
    assert parse_args([]).model == config.model_path


def test_enum_values_are_coerced():
    config = RenderConfig(mode='wireframe', fill='scanline', light_dir=[0, 0, 1])
    assert config.mode is RenderMode.WIREFRAME
    assert config.fill is FillStrategy.SCANLINE
    assert config.light_dir == (0.0, 0.0, 1.0)


def test_bad_light_rejected():
    with pytest.raises(ValueError):
        RenderConfig(light_dir=(1, 2))


def test_from_args():
    args = parse_args(["320", "200", "--model", "cube.obj", "-o", "cube.tga",
                       "--mode", "random", "--fill", "scanline",
                       "--light", "0", "0", "-1", "--background", "#102030",
                       "--no-rle", "--seed", "9"])
    config = RenderConfig.from_args(args)
    assert (config.width, config.height) == (320, 200)
    assert config.model_path == "cube.obj"
    assert config.output_path == "cube.tga"
    assert config.mode is RenderMode.RANDOM
    assert config.fill is FillStrategy.SCANLINE
    assert config.light_dir == (0.0, 0.0, -1.0)
    assert config.background == Color(0x10, 0x20, 0x30)
    assert config.rle is False
    assert config.seed == 9


def test_from_args_dimension_fallback():
    assert RenderConfig.from_args(parse_args([])).width == DEFAULT_SIZE
    config = RenderConfig.from_args(parse_args(["wide", "0"]))
    assert (config.width, config.height) == (DEFAULT_SIZE, DEFAULT_SIZE)


def test_hex_colors():
    assert Color.from_hex("#ff8800") == Color(255, 136, 0, 255)
    assert Color.from_hex("00FF00") == Color(0, 255, 0)
    for bad in ("#GG0000", "#12345", "zzzzzz"):
        with pytest.raises(ValueError):
            Color.from_hex(bad)


@pytest.mark.parametrize("intensity,expected", [(1.0, 255), (0.5, 127), (0.0, 0), (1.7, 255), (-0.2, 0)])
def test_gray_levels(intensity, expected):
    assert Color.gray(intensity) == Color(expected, expected, expected, 255)
