"""A plain-text dump of a loaded scene."""

from __future__ import annotations

from collections.abc import Sequence

from cubscene.scene import GameData

__all__ = ["format_data", "format_map"]


def _field(label: str, value: object) -> str:
    return f"  {label + ':':<16}{value}\n"


def _text(value: str | None) -> str:
    return "(null)" if value is None else value


def _pair(a: float, b: float) -> str:
    return f"({a:.3f}, {b:.3f})"


def format_map(grid: Sequence[str] | None) -> str:
    """Return the map rows, one per line."""
    return "".join(f"{row}\n" for row in grid or ())


def format_data(data: GameData) -> str:
    """Return a report of the window, map, player, ray and texture state."""
    info, player, ray, tex = data.mapinfo, data.player, data.ray, data.texinfo
    parts = [
        f"Window size: {data.win_width} × {data.win_height}\n",
        "MapInfo:\n",
        _field("path", _text(info.path)),
        _field("fd", info.fd),
        _field("line_count", info.line_count),
        _field("dimensions", f"{info.width} × {info.height}"),
        _field("index_end_map", info.index_end_of_map),
        format_map(data.map),
        "Player:\n",
        _field("dir char", player.dir[:1]),
        _field("pos", _pair(player.pos_x, player.pos_y)),
        _field("dir vector", _pair(player.dir_x, player.dir_y)),
        _field("plane vector", _pair(player.plane_x, player.plane_y)),
        _field("moved", player.has_moved),
        _field("move flags", f"x={player.move_x} y={player.move_y}"),
        _field("rotate flag", player.rotate),
        "Ray:\n",
        _field("cam_x", f"{ray.camera_x:.3f}"),
        _field("dir", _pair(ray.dir_x, ray.dir_y)),
        _field("map cell", f"({ray.map_x}, {ray.map_y})"),
        _field("step", f"({ray.step_x}, {ray.step_y})"),
        _field("sideDist", _pair(ray.sidedist_x, ray.sidedist_y)),
        _field("deltaDist", _pair(ray.deltadist_x, ray.deltadist_y)),
        _field("wall_dist", f"{ray.wall_dist:.3f}"),
        _field("wall_x", f"{ray.wall_x:.3f}"),
        _field("side hit", ray.side),
        _field("draw line", f"{ray.draw_start} → {ray.draw_end} (height {ray.line_height})"),
        "TexInfo:\n",
        _field("North", _text(tex.north)),
        _field("South", _text(tex.south)),
        _field("West", _text(tex.west)),
        _field("East", _text(tex.east)),
        _field("hex_floor", f"0x{tex.hex_floor & 0xFFFFFFFFFFFFFFFF:X}"),
        _field("hex_ceiling", f"0x{tex.hex_ceiling & 0xFFFFFFFFFFFFFFFF:X}"),
        _field("size", tex.size),
        _field("index", tex.index),
        _field("step", f"{tex.step:.3f}"),
        _field("pos", f"{tex.pos:.3f}"),
        _field("tex coord", f"({tex.x}, {tex.y})"),
    ]
    return "".join(parts)