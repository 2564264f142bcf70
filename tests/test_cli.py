import json
import os

import pytest

from geolab.cli import main, parse_palette, parse_param


def test_writes_png_and_prints_path(tmp_path, capsys):
    rc = main(["--style", "concentric", "--seed", "abc", "--aspect", "square",
               "--scale", "0.1", "--out", str(tmp_path)])
    assert rc == 0
    out = capsys.readouterr().out.strip()
    assert out == os.path.join(str(tmp_path), "geo-concentric-square-abc.png")
    assert os.path.exists(out)


def test_explicit_out_and_json(tmp_path):
    png = str(tmp_path / "a.png")
    js = str(tmp_path / "a.json")
    assert main(["--style", "orbTrail", "--param", "count=5", "--aspect", "landscape",
                 "--scale", "0.05", "--out", png, "--json", js]) == 0
    with open(js) as f:
        data = json.load(f)
    assert data["style"] == "orbTrail"
    circles = [p for p in data["primitives"] if p["kind"] == "circle"]
    assert len(circles) == 5


def test_request_file_with_overrides(tmp_path):
    req = tmp_path / "req.json"
    req.write_text(json.dumps({"style": "waves", "paletteIndex": 3, "seed": "from-file", "aspectRatio": "square"}))
    js = str(tmp_path / "r.json")
    main(["--request", str(req), "--seed", "flag", "--scale", "0.05",
          "--out", str(tmp_path), "--json", js])
    with open(js) as f:
        data = json.load(f)
    assert data["seed"] == "flag"
    assert data["style"] == "waves"
    assert data["aspect"] == "square"


def test_params_file(tmp_path):
    params = tmp_path / "p.json"
    params.write_text(json.dumps({"cols": 3, "variety": 1}))
    js = str(tmp_path / "c.json")
    main(["--style", "isoCubes", "--params", str(params), "--param", "cols=4",
          "--scale", "0.05", "--out", str(tmp_path), "--json", js])
    assert os.path.exists(js)


def test_non_object_json_rejected(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]")
    with pytest.raises(SystemExit):
        main(["--params", str(bad), "--out", str(tmp_path)])


def test_unknown_style_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--style", "spiral", "--out", str(tmp_path)])
    assert "spiral" in str(exc.value)


def test_list_styles(capsys):
    assert main(["--list-styles"]) == 0
    out = capsys.readouterr().out
    assert "isoCubes" in out and "Perspective Grid" in out
    assert "irregular_amt" in out


def test_list_palettes(capsys):
    assert main(["--list-palettes"]) == 0
    assert "Mono Blues" in capsys.readouterr().out


def test_parse_helpers():
    assert parse_param("count = 9") == ("count", "9")
    assert parse_palette("4") == 4
    assert parse_palette("deep navy pop") == 0


def test_json_to_stdout_stays_parseable(tmp_path, capsys):
    assert main(["--style", "kites", "--json", "-", "--scale", "0.05", "--out", str(tmp_path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["style"] == "kites"
    assert os.path.exists(os.path.join(str(tmp_path), "geo-kites-portrait-seed.png"))


def test_list_styles_marks_gated_params(capsys):
    main(["--list-styles"])
    line = [l for l in capsys.readouterr().out.splitlines() if l.startswith("orbTrail")][0]
    assert "(start_x)" in line and "(start_y)" in line
    assert "trail_scale" in line and "(trail_scale)" not in line
