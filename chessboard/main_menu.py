"""The main menu: start a game, learn the rules, read about the game, or quit."""

from __future__ import annotations

from collections.abc import Sequence

from chessboard.state import Color, MouseEvent, State, StateId, TextItem, Window


class MainMenu(State):
    """The first screen, with its title and four options."""

    def __init__(self, window: Window) -> None:
        super().__init__(window)
        self.start_hover = False
        self.learn_chess_hover = False
        self.about_hover = False
        self.exit_hover = False

        width, height = window.width, window.height
        self.title = self.make_text("CHESS", 0.2 * height, width // 2, height // 4)
        self.title.color = Color.RED

        option_size = 0.08 * height
        centre_x = width // 2
        middle_y = height // 2
        self.start_item = self.make_text("Start", option_size, centre_x, middle_y)
        self.learn_chess_item = self.make_text(
            "Learn Chess", option_size, centre_x, middle_y + 0.1 * height)
        self.about_item = self.make_text(
            "About", option_size, centre_x, middle_y + 0.2 * height)
        self.exit_item = self.make_text(
            "Exit", option_size, centre_x, middle_y + 0.3 * height)

    def _options(self) -> list[tuple[str, TextItem]]:
        return [
            ("start_hover", self.start_item),
            ("learn_chess_hover", self.learn_chess_item),
            ("about_hover", self.about_item),
            ("exit_hover", self.exit_item),
        ]

    def handle_input(self, event: MouseEvent, current: State,
                     states: Sequence[State]) -> State:
        current = super().handle_input(event, current, states)

        if event.moved:
            for flag, item in self._options():
                setattr(self, flag, self.menu_input(item, event))

        if not event.left_pressed:
            return current

        if self.exit_hover:
            self.window.close()
        if self.start_hover:
            current = states[StateId.START_MENU]
            self.start_hover = False
        if self.learn_chess_hover:
            current = states[StateId.LEARN_CHESS]
            self.learn_chess_hover = False
        if self.about_hover:
            current = states[StateId.ABOUT]
            self.about_hover = False
        return current

    def logic(self) -> None:
        for flag, item in self._options():
            self.highlight(getattr(self, flag), item)

    def draw(self) -> list[TextItem]:
        return [self.title, self.start_item, self.learn_chess_item,
                self.about_item, self.exit_item]