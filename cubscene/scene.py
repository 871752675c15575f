"""The state of a loaded scene: window, player, ray, textures and map."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "TEX_SIZE",
    "WIN_HEIGHT",
    "WIN_WIDTH",
    "GameData",
    "MapInfo",
    "Player",
    "Ray",
    "TexInfo",
]

WIN_WIDTH = 640
WIN_HEIGHT = 480
TEX_SIZE = 64


@dataclass
class Player:
    """Where the player stands and looks."""

    dir: str = "\0"
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    has_moved: int = 0
    move_x: int = 0
    move_y: int = 0
    rotate: int = 0


@dataclass
class Ray:
    """The state of one cast ray."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    deltadist_x: float = 0.0
    deltadist_y: float = 0.0
    wall_dist: float = 0.0
    wall_x: float = 0.0
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


@dataclass
class TexInfo:
    """Texture paths, floor and ceiling colours and texture sampling state."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    hex_floor: int = 0x0
    hex_ceiling: int = 0x0
    size: int = TEX_SIZE
    index: int = 0
    step: float = 0.0
    pos: float = 0.0
    x: int = 0
    y: int = 0


@dataclass
class MapInfo:
    """The scene file's lines and the extent of the map inside them."""

    fd: int = 0
    line_count: int = 0
    path: str | None = None
    file: list[str] | None = None
    height: int = 0
    width: int = 0
    index_end_of_map: int = 0


@dataclass
class GameData:
    """Everything known about a scene once it has been loaded."""

    win_width: int = WIN_WIDTH
    win_height: int = WIN_HEIGHT
    player: Player = field(default_factory=Player)
    texinfo: TexInfo = field(default_factory=TexInfo)
    map: list[str] | None = None
    mapinfo: MapInfo = field(default_factory=MapInfo)
    ray: Ray = field(default_factory=Ray)
    textures: list[list[int]] | None = None