"""Rendu texte du plateau TwixT.

Chaque case occupe trois colonnes sur trois lignes: une ligne "avant", la
ligne du pion et une ligne "après". Les liens sont dessinés avec ``/ \\ | _``
autour des pions, en rouge ou en bleu si la sortie ANSI est activée.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from twixt.engine.cell import Color
from twixt.engine.geometry import Compass, Coord, add, off_board

ANSI_RED = "\x1b[91m"
ANSI_BLUE = "\x1b[94m"
ANSI_DEFAULT = "\x1b[0m"

# (décalage de la case portant le lien, direction, caractère)
LinkSpec = Tuple[Coord, Compass, str]
# Une position: groupes essayés dans l'ordre, le premier qui dessine gagne
Slot = Sequence[Sequence[LinkSpec]]

_BEFORE_ROW: Tuple[Slot, ...] = (
    ((((-1, 0), Compass.ENE, "/"), ((-1, -1), Compass.NNE, "/"), ((0, 0), Compass.WNW, "_")),),
    ((((0, 0), Compass.NNE, "|"),), (((0, 0), Compass.NNW, "|"),)),
    ((((1, 0), Compass.WNW, "\\"), ((1, -1), Compass.NNW, "\\"), ((0, 0), Compass.ENE, "_")),),
)

_PEG_ROW_LEFT: Slot = ((((-1, -1), Compass.NNE, "|"), ((0, 0), Compass.WSW, "_")),)
_PEG_ROW_RIGHT: Slot = ((((1, -1), Compass.NNW, "|"), ((0, 0), Compass.ESE, "_")),)

_AFTER_ROW: Tuple[Slot, ...] = (
    ((((1, -1), Compass.WNW, "\\"), ((0, -1), Compass.NNW, "\\")),),
    (
        (
            ((-1, -1), Compass.ENE, "_"),
            ((1, -1), Compass.WNW, "_"),
            ((0, 0), Compass.SSW, "|"),
        ),
        (((0, 0), Compass.SSE, "|"),),
    ),
    ((((-1, -1), Compass.ENE, "/"), ((0, -1), Compass.NNE, "/")),),
)

_RESULT_MARKERS = {
    "RED_WON": "[X has won]",
    "BLUE_WON": "[O has won]",
    "DRAW": "[draw]",
}


class _Renderer:
    def __init__(self, board, ansi_color_output: bool) -> None:
        self._board = board
        self._size = board.size
        self._ansi = ansi_color_output

    def colored(self, text: str, ansi_code: str) -> str:
        if not self._ansi:
            return text
        return f"{ansi_code}{text}{ANSI_DEFAULT}"

    def _link_char(self, coord: Coord, spec: LinkSpec) -> str:
        offset, direction, char = spec
        origin = add(coord, offset)
        if off_board(origin, self._size):
            return ""
        cell = self._board.cell(origin)
        if not cell.has_link(direction):
            return ""
        if cell.color is Color.RED:
            return self.colored(char, ANSI_RED)
        if cell.color is Color.BLUE:
            return self.colored(char, ANSI_BLUE)
        return char

    def slot(self, coord: Coord, slot: Slot) -> str:
        for group in slot:
            text = "".join(self._link_char(coord, spec) for spec in group)
            if text:
                return text
        return " "

    def peg(self, coord: Coord) -> str:
        x, y = coord
        color = self._board.cell(coord).color
        last = self._size - 1
        if color is Color.RED:
            return self.colored("X", ANSI_RED)
        if color is Color.BLUE:
            return self.colored("O", ANSI_BLUE)
        if color is Color.OFFBOARD:
            return " "
        if x in (0, last):
            return self.colored(".", ANSI_BLUE)
        if y in (0, last):
            return self.colored(".", ANSI_RED)
        return "."

    def render(self) -> str:
        size = self._size
        lines: List[str] = []
        header = "".join(self.colored(f"{chr(ord('A') + x)}  ", ANSI_RED) for x in range(size))
        lines.append("     " + header)

        for y in range(size - 1, -1, -1):
            row = size - y
            before = "".join(
                self.slot((x, y), slot) for x in range(size) for slot in _BEFORE_ROW
            )
            pegs = "".join(
                self.slot((x, y), _PEG_ROW_LEFT) + self.peg((x, y)) + self.slot((x, y), _PEG_ROW_RIGHT)
                for x in range(size)
            )
            after = "".join(self.slot((x, y), slot) for x in range(size) for slot in _AFTER_ROW)
            lines.append("    " + before)
            lines.append(("  " if row < 10 else " ") + self.colored(f"{row} ", ANSI_BLUE) + pegs)
            lines.append("    " + after)

        lines.append("")
        footer = ""
        if self._board.swapped:
            footer += "[swapped]"
        footer += _RESULT_MARKERS.get(self._board.result.value, "")
        lines.append(footer)
        return "\n".join(lines)


def render_board(board, ansi_color_output: bool = False) -> str:
    """Représentation texte du plateau (``str(board)`` utilise ce rendu)."""

    return _Renderer(board, ansi_color_output).render()


__all__ = ["render_board", "ANSI_RED", "ANSI_BLUE", "ANSI_DEFAULT"]
