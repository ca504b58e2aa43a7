import pytest

from tilequest.app import TEXTURE_FILES, image_to_surface, load_textures, main
from tilequest.image import Image
from tilequest.xpm import XpmError

XPM_TEXT = (
    "/* XPM */\n"
    "static char *tile[] = {\n"
    '"2 1 2 1",\n'
    '"a c #FF0000",\n'
    '"b c None",\n'
    '"ab"\n'
    "};\n"
)

VALID_MAP = "11111\n1PCE1\n11111\n"


def _write_textures(directory, skip=None):
    directory.mkdir(exist_ok=True)
    for cell, filename in TEXTURE_FILES.items():
        if cell != skip:
            (directory / filename).write_text(XPM_TEXT)
    return directory


def test_load_textures_reads_every_tile(tmp_path):
    textures = load_textures(_write_textures(tmp_path / "textures"))
    assert set(textures) == set(TEXTURE_FILES)
    for image in textures.values():
        assert (image.width, image.height) == (2, 1)
        assert image.get_pixel(0, 0) == 0xFF0000
        assert image.get_pixel(1, 0) == 0xFF000000


def test_load_textures_missing_file_raises(tmp_path):
    directory = _write_textures(tmp_path / "textures", skip="P")
    with pytest.raises(XpmError):
        load_textures(directory)


def test_load_textures_bad_file_raises(tmp_path):
    directory = _write_textures(tmp_path / "textures")
    (directory / TEXTURE_FILES["1"]).write_text("not an image")
    with pytest.raises(XpmError):
        load_textures(directory)


def test_image_to_surface_keeps_size_and_colours():
    image = Image(3, 2)
    image.put_pixel(0, 0, 0xFF0000)
    image.put_pixel(2, 1, 0x0000FF)
    surface = image_to_surface(image)
    assert surface.get_size() == (3, 2)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((2, 1))) == (0, 0, 255, 255)
    assert tuple(surface.get_at((1, 0))) == (0, 0, 0, 255)


def test_image_to_surface_transparent_pixel():
    image = Image(1, 1)
    image.put_pixel(0, 0, 0xFF000000)
    surface = image_to_surface(image)
    assert surface.get_at((0, 0)).a == 0


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(VALID_MAP)
    assert main([str(path)]) == 1
    assert "Map file must have .ber extension." in capsys.readouterr().err


def test_main_rejects_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert "Could not open map file." in capsys.readouterr().err


def test_main_rejects_open_walls(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "Map is not surrounded by walls (left/right)." in capsys.readouterr().err


def test_main_reports_missing_textures(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text(VALID_MAP)
    status = main([str(path), "--textures", str(tmp_path / "nowhere")])
    captured = capsys.readouterr()
    assert status == 1
    assert "Failed to load one or more XPM image files." in captured.err
    assert "Width: 5, Height: 3" in captured.out


def test_main_requires_map_argument():
    with pytest.raises(SystemExit):
        main([])