import pytest

from chessboard.main_menu import MainMenu
from chessboard.state import Color, MouseEvent, StateId, Window


@pytest.fixture
def window():
    return Window(800, 600)


@pytest.fixture
def menu(window):
    return MainMenu(window)


@pytest.fixture
def states(menu):
    return [menu] + [f"screen-{index}" for index in range(1, len(StateId))]


def _press_on(item):
    return MouseEvent(item.x, item.y, moved=True, left_pressed=True)


def test_title(menu):
    assert menu.title.text == "CHESS"
    assert menu.title.color is Color.RED


def test_no_option_hovered_initially(menu):
    assert not (menu.start_hover or menu.learn_chess_hover
                or menu.about_hover or menu.exit_hover)


def test_draw_order(menu):
    assert [item.text for item in menu.draw()] == [
        "CHESS", "Start", "Learn Chess", "About", "Exit"]


def test_options_do_not_overlap(menu):
    items = [menu.start_item, menu.learn_chess_item, menu.about_item, menu.exit_item]
    for upper, lower in zip(items, items[1:]):
        _, top, _, height = upper.bounds()
        assert top + height <= lower.bounds()[1]


def test_start_goes_to_start_menu(menu, states):
    result = menu.handle_input(_press_on(menu.start_item), menu, states)
    assert result == states[StateId.START_MENU]
    assert menu.start_hover is False


def test_learn_chess(menu, states):
    result = menu.handle_input(_press_on(menu.learn_chess_item), menu, states)
    assert result == states[StateId.LEARN_CHESS]


def test_about(menu, states):
    result = menu.handle_input(_press_on(menu.about_item), menu, states)
    assert result == states[StateId.ABOUT]


def test_exit_closes_window(menu, states, window):
    result = menu.handle_input(_press_on(menu.exit_item), menu, states)
    assert window.is_open is False
    assert result is menu


def test_hover_without_press(menu, states):
    item = menu.start_item
    result = menu.handle_input(MouseEvent(item.x, item.y), menu, states)
    assert result is menu
    assert menu.start_hover is True
    menu.logic()
    assert menu.start_item.color is Color.MAGENTA
    assert menu.learn_chess_item.color is Color.BLUE
    assert menu.exit_item.color is Color.BLUE


def test_moving_away_clears_hover(menu, states):
    item = menu.about_item
    menu.handle_input(MouseEvent(item.x, item.y), menu, states)
    menu.handle_input(MouseEvent(1, 1), menu, states)
    assert menu.about_hover is False


def test_press_without_hover_stays(menu, states, window):
    event = MouseEvent(1, 1, moved=False, left_pressed=True)
    assert menu.handle_input(event, menu, states) is menu
    assert window.is_open is True


def test_states_unchanged(menu, states):
    before = list(states)
    menu.handle_input(_press_on(menu.start_item), menu, states)
    assert states == before


def test_empty_states_rejected(menu):
    with pytest.raises(ValueError):
        menu.handle_input(MouseEvent(0, 0), menu, [])