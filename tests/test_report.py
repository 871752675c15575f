from cubscene.report import format_data, format_map
from cubscene.scene import TEX_SIZE, WIN_HEIGHT, WIN_WIDTH, GameData


def test_format_map_one_row_per_line():
    assert format_map(["11", "1N1"]) == "11\n1N1\n"


def test_format_map_empty():
    assert format_map(None) == ""
    assert format_map([]) == ""


def test_format_data_header_and_sections():
    report = format_data(GameData())
    assert report.startswith(f"Window size: {WIN_WIDTH} × {WIN_HEIGHT}\n")
    for section in ("MapInfo:\n", "Player:\n", "Ray:\n", "TexInfo:\n"):
        assert section in report
    assert report.index("MapInfo:") < report.index("Player:") < report.index("Ray:")


def test_format_data_null_path():
    assert "  path:           (null)\n" in format_data(GameData())


def test_format_data_includes_map():
    data = GameData()
    data.map = ["111", "1N1", "111"]
    report = format_data(data)
    assert format_map(data.map) in report
    assert report.index("1N1") < report.index("Player:")


def test_format_data_values():
    data = GameData()
    data.player.pos_x = 1.5
    data.player.pos_y = 2.25
    data.texinfo.hex_floor = 255
    data.texinfo.north = "n.xpm"
    report = format_data(data)
    assert "  pos:            (1.500, 2.250)\n" in report
    assert "  hex_floor:      0xFF\n" in report
    assert "  North:          n.xpm\n" in report
    assert f"  size:           {TEX_SIZE}\n" in report


def test_every_label_aligned():
    lines = [line for line in format_data(GameData()).splitlines() if line.startswith("  ")]
    assert lines
    assert all(line[2:18].rstrip().endswith(":") for line in lines)