# chessboard

Move generation for knights, pawns, rooks and queens, and the menu and
rules screens of a two-player chess game. It is plain Python with no
dependencies.

## Board layout

Squares are numbered 0 to 63, row by row from the top of the board.
Square `n` lies in column `n % 8` and row `n // 8`. Row 0 is Black's back
rank and row 7 is White's. A captured piece has position `-1`. Setting a
piece's `position` to anything outside 0–63 stores `-1` and clears its
possible moves. Any assignment to `position` sets `moved` to `True`.

Move calculations take the full lists of white and black pieces. The
white king is expected at index 4 of the white list and the black king at
index 3 of the black list. These two entries only need a `position`. They
decide which moves count as a danger to the opposing king: the black king
when `player_turn` is false, the white king when it is true.

## Pieces

`chessboard.pieces` holds the abstract `Piece` base class together with
`Knight` and `Pawn`. `chessboard.sliding` holds `Rook` and `Queen`.

```python
from chessboard.sliding import Queen

queen = Queen(True, 59, False)
print(queen.describe())   # same text as str(queen)
# White Queen
# to position
# X: 4  Y: 8
```

Every piece has these attributes:

- `kind`: one of `"K"`, `"Q"`, `"R"`, `"B"`, `"N"` or `"P"`.
- `white`: `True` for White.
- `position`
- `moved`
- `en_passant`: `-1` unless it is set.
- `possible_moves`
- `danger_moves`

`calc_moves(white_pieces, black_pieces, player_turn)` refreshes
`possible_moves` and `danger_moves`. The piece's own square is always the
last entry of `danger_moves`. Each piece computes its moves as follows:

- `Knight` lists its L-shaped jumps that stay on the board.
- `Pawn` does four things:
  - It steps forward when the square is empty and it is the pawn's own turn.
  - It steps two squares if it has not moved.
  - It lists the diagonal squares that hold a piece or that match an opponent's `en_passant` square.
  - On the other side's turn it lists both diagonals, as the squares it threatens.
- `Rook` and `Queen` walk rows and columns. The queen also walks the
  diagonals. Each ray stops at the first occupied square, and that square
  is included. The ray that reaches the targeted king is kept in
  `danger_moves` while few enough other pieces stand on it.

## Screens

`chessboard.state` models screens without drawing anything:

- `Window` is a width, a height and an open flag, with `close()`.
- `TextItem` is a positioned label with an estimated size, `bounds()` and
  `contains(x, y)`.
- `MouseEvent` carries the pointer position, whether it moved, and whether
  the left button is pressed.
- `Color` lists the fill colours.
- `StateId` gives the index of each screen in the list of states.
- `State` is the abstract base class for screens.

`State` provides these methods:

- `make_text(...)` centres a label on a point. It raises `ValueError` for
  empty text, a non-positive size or a negative position.
- `menu_input(item, event)` reports hovering.
- `highlight(active, item)` colours a label magenta when active and blue
  otherwise.
- `calculate_time()` adds the elapsed time to the clock text.

The screens are:

- `chessboard.main_menu.MainMenu` is the title screen with Start,
  Learn Chess, About and Exit. Exit closes the window.
- `chessboard.rules.LearnChess` is the page on how each piece moves. It
  links back to the main menu and on to the next page.
- `chessboard.rules.LearnChessSpecial` is the page on special moves,
  check, checkmate and draws. It links back to the first rules page.

Each screen works through three methods:

- `handle_input(event, current, states)` returns the screen to show next,
  picked from `states` by `StateId`. It raises `ValueError` if `states`
  is empty.
- `logic()` updates the highlighting.
- `draw()` returns the text items it shows, in drawing order.

## What this package does not do

- It renders nothing. There is no window, font or image output.
- It has no command to run a game.
- There are no `King` or `Bishop` classes.
- There is no game controller that applies moves, checks for mate, keeps
  score or promotes pawns.
- `StateId` names the start menu, the timed play screens and the about
  screen, but the package has no classes for them. The caller supplies
  whatever objects stand at those indexes.

## Tests

Install the `test` extra and run `pytest` from the project directory.