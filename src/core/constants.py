"""Fixed dimensions of the game. There are no variants, so nothing here is configurable."""

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Players address cells 1-9, the board stores them 0-8
FIRST_CELL = 1
LAST_CELL = CELL_COUNT
