import logging

import pytest
from PIL import Image

from soft_rasterizer.cli import main
from soft_rasterizer.logging_config import LOGGER_NAME, setup_logging

# Triangle in the lower half of model space: y in [-1, -0.5]
LOW_TRIANGLE = """\
v -1.0 -1.0 0.0
v 0.0 -0.5 0.0
v 1.0 -1.0 0.0
f 1 2 3
"""


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_renders_one_image(obj_file, tmp_path):
    model = obj_file(LOW_TRIANGLE)
    out = tmp_path / "out.tga"
    code = main(["40", "30", "--model", str(model), "--output", str(out),
                 "--light", "0", "0", "1"])
    assert code == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["model.obj", "out.tga"]

    with Image.open(out) as im:
        assert im.size == (40, 30)
        rgb = im.convert("RGB")
        # y grows upwards while rendering, so the triangle ends up at the bottom
        assert rgb.getpixel((20, 27)) == (255, 255, 255)
        assert rgb.getpixel((20, 2)) == (0, 0, 0)


def test_success_is_silent(obj_file, tmp_path, capfd):
    model = obj_file(LOW_TRIANGLE)
    out = tmp_path / "out.tga"
    assert main(["10", "10", "-m", str(model), "-o", str(out)]) == 0
    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert out.exists()


@pytest.mark.parametrize("flags,debug", [(["-v"], False), (["-vv"], True), (["-v", "-v", "-v"], True)])
def test_verbose_reports_progress(obj_file, tmp_path, capfd, flags, debug):
    model = obj_file(LOW_TRIANGLE)
    out = tmp_path / "out.tga"
    # Light from behind culls the only face, which is logged at debug level
    assert main(["10", "10", "-m", str(model), "-o", str(out), "--light", "0", "0", "-1"] + flags) == 0
    err = capfd.readouterr().err
    assert "Loaded" in err
    assert "pixels differ from the background" in err
    assert "Wrote 10x10 image" in err
    assert (" - DEBUG - " in err) == debug


def test_missing_model_writes_nothing(tmp_path):
    out = tmp_path / "out.tga"
    code = main(["10", "10", "--model", str(tmp_path / "missing.obj"), "-o", str(out)])
    assert code == 1
    assert not out.exists()


def test_bad_face_index_writes_nothing(obj_file, tmp_path):
    model = obj_file("v 0 0 0\nv 1 0 0\nv 1 1 0\nf 1 2 9\n")
    out = tmp_path / "out.tga"
    assert main(["10", "10", "-m", str(model), "-o", str(out)]) == 1
    assert not out.exists()


def test_non_finite_vertex_writes_nothing(obj_file, tmp_path, capfd):
    model = obj_file("v nan 0 0\nv 1 0 0\nv 1 1 0\nf 1 2 3\n")
    out = tmp_path / "out.tga"
    assert main(["10", "10", "-m", str(model), "-o", str(out)]) == 1
    assert not out.exists()
    assert "non-finite" in capfd.readouterr().err


def test_non_utf8_model_writes_nothing(tmp_path):
    model = tmp_path / "model.obj"
    model.write_bytes(b"# caf\xe9 model\n" + LOW_TRIANGLE.encode())
    out = tmp_path / "out.tga"
    assert main(["10", "10", "-m", str(model), "-o", str(out)]) == 1
    assert not out.exists()


def test_bad_background_is_an_argument_error(obj_file, tmp_path):
    model = obj_file(LOW_TRIANGLE)
    out = tmp_path / "out.tga"
    assert main(["10", "10", "-m", str(model), "-o", str(out), "--background", "red"]) == 2
    assert not out.exists()


@pytest.mark.parametrize("mode", ["wireframe", "random"])
def test_other_modes(obj_file, tmp_path, mode):
    model = obj_file(LOW_TRIANGLE)
    out = tmp_path / "out.png"
    assert main(["16", "16", "-m", str(model), "-o", str(out), "--mode", mode, "--seed", "2"]) == 0
    with Image.open(out) as im:
        assert im.format == "PNG"


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "render.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    logging.getLogger("soft_rasterizer.test").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
