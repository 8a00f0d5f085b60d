"""
Tests for the convenience API and the command line front end.
"""

import numpy as np
import pytest
from PIL import Image
from sprite_overlay import overlay, slice_sheet, SpriteParser
from sprite_overlay.main import main


@pytest.fixture
def torch_png(tmp_path):
    pixels = np.zeros((16, 8, 4), dtype=np.uint8)
    pixels[8:16, 2:6] = (120, 80, 40, 255)
    path = tmp_path / "torch.png"
    Image.fromarray(pixels, 'RGBA').save(path)
    return path


@pytest.fixture
def sheet_png(tmp_path):
    pixels = np.zeros((8, 12, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    path = tmp_path / "sheet.png"
    Image.fromarray(pixels, 'RGBA').save(path)
    return path


def test_overlay_writes_default_path(torch_png):
    output = overlay(str(torch_png), effect="flame", seed=1)

    assert output == torch_png.parent / "torch_flame.png"
    layer = SpriteParser.parse(output)
    source = SpriteParser.parse(torch_png)
    assert np.all(layer.pixels[source.occupied] == 0)
    assert layer.occupied.any()


def test_overlay_alias_and_composite(torch_png, tmp_path):
    output = overlay(str(torch_png), effect="fire", output_path=tmp_path / "lit.png",
                     seed=1, composite=True)

    result = SpriteParser.parse(output)
    source = SpriteParser.parse(torch_png)
    assert np.array_equal(result.pixels[source.occupied], source.pixels[source.occupied])
    assert np.count_nonzero(result.occupied) > np.count_nonzero(source.occupied)


def test_overlay_from_preset_is_reproducible(torch_png, tmp_path):
    first = overlay(str(torch_png), preset="rust", seed=3, output_path=tmp_path / "a.png")
    second = overlay(str(torch_png), preset="rust", seed=3, output_path=tmp_path / "b.png")

    assert first.read_bytes() == second.read_bytes()


def test_overlay_params_override(torch_png, tmp_path):
    output = overlay(str(torch_png), effect="corrosion", output_path=tmp_path / "c.png",
                     colors=["#00FF00"], iterations=1, seeds=2, seed=4)

    layer = SpriteParser.parse(output)
    assert np.count_nonzero(layer.occupied) == 2


def test_overlay_requires_effect(torch_png):
    with pytest.raises(ValueError):
        overlay(str(torch_png))


def test_overlay_unknown_preset(torch_png):
    with pytest.raises(ValueError):
        overlay(str(torch_png), preset="no_such_preset")


def test_slice_sheet(sheet_png, tmp_path):
    paths = slice_sheet(str(sheet_png), 4, output_dir=tmp_path / "tiles")

    assert len(paths) == 6
    assert all(p.exists() for p in paths)
    assert SpriteParser.parse(paths[0]).pixels.shape == (4, 4, 4)


def test_cli_generates_overlay(torch_png, tmp_path, capsys):
    out = tmp_path / "cli.png"
    main([str(torch_png), "-e", "drip", "-c", "#FF0000", "#330000",
          "--seed", "2", "--gradient-size", "5", "-o", str(out)])

    assert out.exists()
    assert "Done!" in capsys.readouterr().out


def test_cli_slice(sheet_png, tmp_path, capsys):
    main([str(sheet_png), "--slice", "4", "-o", str(tmp_path / "cut")])

    assert len(list((tmp_path / "cut").glob("tile_*.png"))) == 6
    assert "Tiles: 6" in capsys.readouterr().out


def test_cli_list_presets(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--list-presets"])

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "torch_flame" in out
    assert "[CORROSION]" in out


def test_cli_missing_input(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 1
    assert "Error: Input file is required" in capsys.readouterr().out


def test_cli_unknown_effect(torch_png, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(torch_png), "-e", "sparkle"])

    assert exc.value.code == 1
    assert "Error: Unknown overlay" in capsys.readouterr().out


def test_cli_bad_color(torch_png, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(torch_png), "-e", "glow", "-c", "#XYZ", "#000000"])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_cli_list_presets_groups_aliases(tmp_path, monkeypatch, capsys):
    from sprite_overlay.core import presets

    (tmp_path / "ember.yaml").write_text("effect: fire\ndescription: Alias flame\n")
    (tmp_path / "odd.yaml").write_text("effect: sparkle\ndescription: No such overlay\n")
    monkeypatch.setattr(presets, "_manager", presets.PresetManager(tmp_path))

    with pytest.raises(SystemExit):
        main(["--list-presets"])

    out = capsys.readouterr().out
    flame_section = out.split("[FLAME]")[1].split("[DRIP]")[0]
    assert "ember" in flame_section
    assert "torch_flame" in flame_section
    assert "[SPARKLE]" in out
    assert "odd" in out.split("[SPARKLE]")[1]
    assert f"Total: {len(presets.BUILTIN_PRESETS) + 2} presets" in out
