import json

from PIL import Image

import main
from test_config import SCENE


def test_renders_scene_file(tmp_path):
    scene = json.loads(json.dumps(SCENE))
    scene["camera"].update(width=8, height=4, samples_per_pixel=1, max_depth=2)
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps(scene))
    out = tmp_path / "out.png"

    status = main.main([str(scene_path), "-o", str(out), "--workers", "1",
                        "--seed", "3", "--quiet"])
    assert status == 0
    with Image.open(out) as img:
        assert img.size == (8, 4)


def test_missing_scene_file(tmp_path, capsys):
    status = main.main([str(tmp_path / "missing.json"), "--quiet"])
    assert status == 1
    assert "not found" in capsys.readouterr().err


def test_bad_output_extension(tmp_path, capsys):
    scene = json.loads(json.dumps(SCENE))
    scene["camera"].update(width=2, height=2, samples_per_pixel=1, max_depth=1)
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps(scene))
    status = main.main([str(scene_path), "-o", str(tmp_path / "x.bogus"),
                        "--workers", "1", "--quiet"])
    assert status == 1
    assert "Cannot write image" in capsys.readouterr().err


def test_demo_scene_is_deterministic():
    a = main.create_world()
    b = main.create_world()
    assert len(a) == len(b) > 3
    assert [tuple(s.center) for s in a] == [tuple(s.center) for s in b]
    camera = main.create_camera()
    assert camera.lookfrom.x == 13


def test_binary_scene_file(tmp_path, capsys):
    scene_path = tmp_path / "scene.json"
    scene_path.write_bytes(b"\xff\xfe{\x00")
    status = main.main([str(scene_path), "--quiet"])
    assert status == 1
    assert "UTF-8" in capsys.readouterr().err
