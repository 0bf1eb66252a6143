"""Plain-text rendering of the board for the terminal."""

import string

from .board import BoardState


LOADING_TEXT = "Loading..."


def cell_label(category_index: int, clue_index: int) -> str:
    """Coordinate label for a cell: column letter, then 1-based row ("B3")."""
    return f"{string.ascii_uppercase[category_index]}{clue_index + 1}"


def parse_cell_label(label: str, board: BoardState) -> tuple[int, int]:
    """
    Parse a label like "B3" into (category_index, clue_index).

    Raises:
        ValueError: if the label doesn't name a cell on the board
    """
    label = label.strip().upper()
    if len(label) < 2 or label[0] not in string.ascii_uppercase or not label[1:].isdecimal():
        raise ValueError(f"Not a cell: {label!r}")
    category_index = string.ascii_uppercase.index(label[0])
    clue_index = int(label[1:]) - 1
    if not (0 <= category_index < board.num_categories and 0 <= clue_index < board.clues_per_category):
        raise ValueError(f"No such cell: {label}")
    return category_index, clue_index


def _fit(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) > width:
        text = text[: width - 1] + "…"
    return f"{text:^{width}}"


def render_board(board: BoardState, width: int = 14) -> str:
    """
    Render the board as a table: a header row with the category titles,
    then one row per clue. Titles carry their column letter and rows end
    with their number, matching cell_label().
    """
    if not board.is_ready:
        return LOADING_TEXT

    lines = []
    header = [_fit(f"{string.ascii_uppercase[i]}: {t}", width) for i, t in enumerate(board.titles)]
    lines.append(" | ".join(header))
    lines.append("-+-".join("-" * width for _ in header))

    for row in range(board.clues_per_category):
        cells = []
        for col in range(board.num_categories):
            text = board.get_display_text(col, row)
            cells.append(_fit(text, width))
        lines.append(" | ".join(cells) + f"   {row + 1}")
    return "\n".join(lines)
