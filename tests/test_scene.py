from cubscene.scene import (
    TEX_SIZE,
    WIN_HEIGHT,
    WIN_WIDTH,
    GameData,
    MapInfo,
    Player,
    Ray,
    TexInfo,
)


def test_game_data_window_defaults():
    data = GameData()
    assert (data.win_width, data.win_height) == (WIN_WIDTH, WIN_HEIGHT)
    assert data.map is None
    assert data.textures is None


def test_texinfo_defaults():
    tex = TexInfo()
    assert tex.size == TEX_SIZE
    assert (tex.north, tex.south, tex.west, tex.east) == (None, None, None, None)
    assert tex.floor is None and tex.ceiling is None
    assert tex.hex_floor == 0 and tex.hex_ceiling == 0


def test_player_defaults():
    player = Player()
    assert player.dir == "\0"
    assert (player.pos_x, player.pos_y, player.plane_x, player.plane_y) == (0.0, 0.0, 0.0, 0.0)
    assert player.has_moved == 0


def test_ray_defaults_all_zero():
    ray = Ray()
    assert ray.wall_dist == 0.0
    assert (ray.draw_start, ray.draw_end, ray.line_height) == (0, 0, 0)


def test_mapinfo_defaults():
    info = MapInfo()
    assert info.path is None
    assert info.file is None
    assert (info.height, info.width, info.index_end_of_map, info.line_count) == (0, 0, 0, 0)


def test_game_data_parts_are_independent():
    first = GameData()
    second = GameData()
    first.texinfo.north = "north.xpm"
    first.player.pos_x = 3.5
    assert second.texinfo.north is None
    assert second.player.pos_x == 0.0
    assert first.texinfo is not second.texinfo


def test_game_data_equality_after_changes():
    data = GameData()
    data.mapinfo.height = 5
    assert data != GameData()
    assert data.mapinfo == MapInfo(height=5)