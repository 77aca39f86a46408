"""The two rule screens: how each piece moves, then the special rules."""

from __future__ import annotations

from collections.abc import Sequence

from chessboard.state import Color, MouseEvent, State, StateId, TextItem, Window

_TITLE = "Rules of CHESS"

_INTRO = (
    "2 colours of chess White and black, 6 different coins of chess.\n"
    "It contains 8 Pawns, 2 Knights,2 Rocks, 2 Bishops, 1 King ,1 Queen of each colour.\n"
    "Totally the board contains 16 black coins, 16 White coins. Total=32 coins.\n"
    "It coins alternate White and black grids 32 white ,32 black grids.\n"
    "1.King     2.Queen     3.Bishop     4.Rock     5.Knight     6.Pawn"
)

_PIECE_RULES = (
    ("King:", 6, (
        "-King can move only one step in any direction.\n"
        "-King is the main coin to be protected until end of game.\n"
        "-It can kill any coin in its way except the opponent king.")),
    ("Queen:", 6, (
        "-Queen is also one of the powerful coins in this game.\n"
        "-It can move any number of steps horizantally,Vertically and diagonally.\n"
        "-It can kill the opponent in its way also it can attack opponent king.")),
    ("Bishop:", 6, (
        "-Bishop can only move diagonally only.\n"
        "-The Bishop placed in white grid can only move diagonally in white grids similarly black.\n"
        "-It can kill the opponent in its way also it can attack opponent king.")),
    ("Rook:", 6, (
        "-Rock can move any number of steps either horizantally or vertically only.\n"
        "-Rock is also important during castling move.\n"
        "-It can kill the opponent in its way also it can attack opponent king.")),
    ("Knight:", 6, (
        "-Knight can move 3 steps in L-shape.\n"
        "-Two steps forward horizantally or vertically and one step either to left or right.\n"
        "-It is the only coin that can jump even if there are obstracles between.\n"
        "-It can kill the opponent in its way also it can attack opponent king.")),
    ("Pawn:", 9, (
        "-Pawn can move 1 or 2 steps initially and 1 step in every next move.\n"
        "-It can only move in forward direction in vertical direction only.\n"
        "-It can kill opponent which is placed one step diagonally placed before it "
        "also it can attack opponent king.\n"
        "-Pawn when reaches the position of opponent high powers it can be transformed "
        "into a higher power other than king.")),
)

_NOTE = "Note\nExcept the Knight no other coin can jump if there are obstracles."
_SPECIAL = "Special moves:\n1.Castling move   2.En Pasant move."

_SPECIAL_RULES = (
    ("Castling:", (
        "-This move is possible when the king and Rock of same color lie in same line.\n"
        "-This move should be taken when no other coins lie in between King and Rock.\n"
        "-In this move The king should move to the side of Rock with which it want to "
        "castle by one step.\n"
        "-Then the Rock movess to the other side of king (next vacant grid to king)")),
    ("EnPassant:", (
        "This rule holds when the Pawn initially moves two steps  in first move and "
        "reaches the adjacent side of opponent\n"
        "-Then the opponent can capture this Pawn and move a step foeward.\n"
        "-This move should be taken immediately after the Pawn reaches its side. "
        "Else it is not Valid.")),
    ("Check:", (
        "-The main aim of the game is to attack the opponent King.\n"
        "-The King is said to be in check if any opponent has chance to attack king "
        "in next move.\n"
        "-In such case The King has to be protected by moving to the place where there "
        "is no chance of attack (in one step).")),
    ("CheckMate:", (
        "-The king is said to be in checkmate if all secure places are under attack of "
        "opponent and King has no way to move.\n"
        "-If The King is in checkmate then the opponent is declared as a winner.")),
    ("Draw:", (
        "- A game is said to be draw if none of the players have any legal moves to "
        "capture opponent King.\n"
        "-This is also described as stalemate.")),
)


class _RulesPage(State):
    """Shared layout for a page of rules: a title, text blocks and a back link."""

    def __init__(self, window: Window) -> None:
        super().__init__(window)
        self.back_hover = False
        height = window.height
        self.title = self.make_text(_TITLE, 0.08 * height, window.width // 2, 0)
        self.title.y = self.title.height / 2
        self.title.color = Color.RED
        self.back_item = TextItem("Back", int(0.04 * height), 0, 0)

    def _below(self, above: TextItem, text: str, size_ratio: float, x: float,
               gap_ratio: float) -> TextItem:
        """A text item placed under ``above`` with a gap relative to the window."""
        height = self.window.height
        y = above.height / 2 + above.y + gap_ratio * height
        return self.make_text(text, size_ratio * height, x, y)

    def _heading(self, above: TextItem, text: str, x: float, gap_ratio: float) -> TextItem:
        item = self._below(above, text, 0.03, x, gap_ratio)
        item.color = Color.RED
        item.bold = True
        return item

    def _body(self, above: TextItem, text: str, size_ratio: float,
              gap_ratio: float) -> TextItem:
        item = self._below(above, text, size_ratio, self.window.width // 2, gap_ratio)
        item.color = Color.BLACK
        return item


class LearnChess(_RulesPage):
    """The first rules page: the pieces and how they move."""

    def __init__(self, window: Window) -> None:
        super().__init__(window)
        self.next_hover = False
        width, height = window.width, window.height

        self.intro = self.make_text(_INTRO, 0.02 * height, width // 2, 0.2 * height)
        self.intro.color = Color.BLACK

        self.sections: list[tuple[TextItem, TextItem]] = []
        above = self.intro
        heading_gap = 0.02
        for heading_text, divisor, body_text in _PIECE_RULES:
            heading = self._heading(above, heading_text, width // divisor, heading_gap)
            body = self._body(heading, body_text, 0.02, 0.03)
            self.sections.append((heading, body))
            above = body
            heading_gap = 0.03

        self.next_item = TextItem("Next", int(0.04 * height), 0.93 * width, 0)

    def handle_input(self, event: MouseEvent, current: State,
                     states: Sequence[State]) -> State:
        current = super().handle_input(event, current, states)
        if event.moved:
            self.back_hover = self.menu_input(self.back_item, event)
            self.next_hover = self.menu_input(self.next_item, event)
        if not event.left_pressed:
            return current
        if self.back_hover:
            current = states[StateId.MAIN_MENU]
            self.back_hover = False
        if self.next_hover:
            current = states[StateId.LEARN_CHESS_SPECIAL]
            self.next_hover = False
        return current

    def logic(self) -> None:
        self.highlight(self.back_hover, self.back_item)
        self.highlight(self.next_hover, self.next_item)

    def draw(self) -> list[TextItem]:
        items = [self.title, self.intro]
        for heading, body in self.sections:
            items.extend((heading, body))
        items.extend((self.next_item, self.back_item))
        return items


class LearnChessSpecial(_RulesPage):
    """The second rules page: special moves, check, checkmate and draws."""

    def __init__(self, window: Window) -> None:
        super().__init__(window)
        width, height = window.width, window.height

        self.note = self.make_text(_NOTE, 0.03 * height, width // 2, 0.2 * height)
        self.note.color = Color.BLACK
        self.special = self._body(self.note, _SPECIAL, 0.03, 0.05)

        self.sections: list[tuple[TextItem, TextItem]] = []
        above = self.special
        for heading_text, body_text in _SPECIAL_RULES:
            heading = self._heading(above, heading_text, width // 6, 0.04)
            body = self._body(heading, body_text, 0.02, 0.04)
            self.sections.append((heading, body))
            above = body

    def handle_input(self, event: MouseEvent, current: State,
                     states: Sequence[State]) -> State:
        current = super().handle_input(event, current, states)
        if event.moved:
            self.back_hover = self.menu_input(self.back_item, event)
        if event.left_pressed and self.back_hover:
            current = states[StateId.LEARN_CHESS]
            self.back_hover = False
        return current

    def logic(self) -> None:
        self.highlight(self.back_hover, self.back_item)

    def draw(self) -> list[TextItem]:
        items = [self.title, self.note, self.special]
        for heading, body in self.sections:
            items.extend((heading, body))
        items.append(self.back_item)
        return items