import pytest

from chessboard.state import Color, MouseEvent, State, StateId, TextItem, Window


class _Screen(State):
    def logic(self):
        pass

    def draw(self):
        return [self.time_text]


@pytest.fixture
def screen():
    return _Screen(Window(800, 600))


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State(Window(800, 600))


def test_window_close():
    window = Window(640, 480)
    assert window.is_open
    window.close()
    assert window.is_open is False


def test_initial_clock_text(screen):
    assert screen.time_text.text == "Time: \n 0 : 0 : 0"
    assert screen.time_text.color is Color.GREEN
    assert (screen.hours, screen.minutes, screen.seconds) == (0, 0, 0)


def test_background_matches_window(screen):
    assert screen.background_size == (800, 600)


def test_make_text_is_centred(screen):
    item = screen.make_text("Hello", 40, 300, 200)
    left, top, width, height = item.bounds()
    assert left + width / 2 == pytest.approx(300)
    assert top + height / 2 == pytest.approx(200)
    assert item.text == "Hello"
    assert item.character_size == 40


def test_make_text_truncates_size(screen):
    item = screen.make_text("x", 48.9, 10, 10)
    assert item.character_size == 48


@pytest.mark.parametrize("args", [
    ("", 20, 10, 10),
    ("text", 0, 10, 10),
    ("text", 0.5, 10, 10),
    ("text", 20, -1, 10),
    ("text", 20, 10, -1),
])
def test_make_text_rejects_bad_arguments(screen, args):
    with pytest.raises(ValueError):
        screen.make_text(*args)


def test_text_contains_its_position(screen):
    item = screen.make_text("Option", 30, 400, 300)
    assert item.contains(400, 300)
    assert not item.contains(0, 0)


def test_multiline_text_is_taller():
    one = TextItem("a", 20)
    two = TextItem("a\nb", 20)
    assert two.height == 2 * one.height
    assert two.width == one.width


def test_menu_input(screen):
    item = screen.make_text("Option", 30, 400, 300)
    assert screen.menu_input(item, MouseEvent(400, 300)) is True
    assert screen.menu_input(item, MouseEvent(5, 5)) is False


@pytest.mark.parametrize("active, colour", [(True, Color.MAGENTA), (False, Color.BLUE)])
def test_highlight(screen, active, colour):
    item = screen.make_text("Option", 30, 400, 300)
    screen.highlight(active, item)
    assert item.color is colour


def test_highlight_keeps_layout(screen):
    item = screen.make_text("Option", 30, 400, 300)
    before = item.bounds()
    screen.highlight(True, item)
    assert item.bounds() == before


def test_calculate_time(screen):
    screen.start -= 3725
    screen.calculate_time()
    assert (screen.hours, screen.minutes, screen.seconds) == (1, 2, 5)
    assert screen.time_text.text == "Time: \n 1 : 2 : 5"


def test_calculate_time_accumulates(screen):
    screen.start -= 30
    screen.calculate_time()
    screen.start -= 40
    screen.calculate_time()
    assert screen.minutes == 1
    assert screen.seconds == 10


def test_handle_input_requires_states(screen):
    with pytest.raises(ValueError):
        screen.handle_input(MouseEvent(0, 0), screen, [])


def test_handle_input_keeps_current(screen):
    assert screen.handle_input(MouseEvent(0, 0), screen, [screen]) is screen


def test_state_ids_index_the_list():
    window = Window(800, 600)
    screens = [_Screen(window) for _ in StateId]
    assert len(screens) == 10
    about = screens[StateId.ABOUT]
    assert about is screens[9]
    assert about.handle_input(MouseEvent(0, 0), about, screens) is screens[9]