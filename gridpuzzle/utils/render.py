"""Plain-text view of a session, used by the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpuzzle.core.enums import TileKind

if TYPE_CHECKING:
    from gridpuzzle.engine.session import LevelSession

GLYPHS: dict[TileKind, str] = {
    TileKind.EMPTY: ".",
    TileKind.WALL: "#",
    TileKind.KEY: "k",
    TileKind.LOCK: "L",
    TileKind.GEM: "g",
    TileKind.STAR: "*",
}
PLAYER_GLYPH = "@"


def render_text(session: LevelSession) -> str:
    player = session.get_player_state()
    lines: list[str] = []
    for y, row in enumerate(session.get_grid_world().rows()):
        chars = []
        for x, tile in enumerate(row):
            if (x, y) == (player.x, player.y):
                chars.append(PLAYER_GLYPH)
            elif tile.is_enemy:
                chars.append(str(tile.power))
            else:
                chars.append(GLYPHS[tile.kind])
        lines.append("".join(chars))
    lines.append(f"HP: {player.hp}  Def: {player.def_}  Key: {player.keys}")
    return "\n".join(lines)
