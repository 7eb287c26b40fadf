"""Connect Four rules for a grid of any size."""


from ..core.errors import InvalidColumnError
from ..core.types import EMPTY, Grid, Position


# (row step, col step) for each line a win can run along
DIRECTIONS = (
    (0, 1),   # Horizontal (right)
    (1, 0),   # Vertical (down)
    (1, 1),   # Diagonal down-right
    (1, -1),  # Diagonal down-left
)


class Connect4Rules:
    """Connect Four rules.

    Win condition: `win_length` in a row (horizontal, vertical, or diagonal)
    """

    def __init__(self, win_length: int = 4):
        """Initialize rules.

        Args:
            win_length: Number in a row to win (4 default)
        """
        self.win_length = win_length

    def check_column(self, grid: Grid, column: int) -> None:
        """Raise InvalidColumnError if column is outside the grid."""
        if not 0 <= column < grid.width:
            raise InvalidColumnError(column, grid.width)

    def landing_row(self, grid: Grid, column: int) -> int | None:
        """Get the row where a piece would land in given column.

        Args:
            grid: Current grid
            column: Column to drop piece in

        Returns:
            Lowest empty row index, or None if column is full
        """
        for row in range(grid.height - 1, -1, -1):
            if grid.is_empty(row, column):
                return row
        return None

    def legal_moves(self, grid: Grid) -> list[int]:
        """Get columns that aren't full."""
        return [col for col in range(grid.width) if grid[0, col] == EMPTY]

    def find_win(self, grid: Grid, seat: int) -> list[Position]:
        """Find a winning line held by `seat`.

        Every cell is tried as an anchor, in row-major order, against every
        direction.

        Args:
            grid: Current grid
            seat: Seat of the player who just moved

        Returns:
            Positions of the first winning line found, or empty list if none
        """
        for row in range(grid.height):
            for col in range(grid.width):
                if grid[row, col] != seat:
                    continue

                for dr, dc in DIRECTIONS:
                    positions = self._check_direction(grid, row, col, dr, dc, seat)
                    if positions:
                        return positions

        return []

    def _check_direction(
        self,
        grid: Grid,
        start_row: int,
        start_col: int,
        dr: int,
        dc: int,
        seat: int,
    ) -> list[Position]:
        """Check for win_length in a row in given direction.

        Returns:
            List of winning positions, or empty list if no win
        """
        positions = []

        for i in range(self.win_length):
            row = start_row + i * dr
            col = start_col + i * dc

            if not grid.in_bounds(row, col):
                return []

            if grid[row, col] != seat:
                return []

            positions.append(Position(row=row, col=col))

        return positions

    def is_draw(self, grid: Grid) -> bool:
        """Check whether the grid is full.

        Only meaningful once the caller has ruled out a win.
        """
        return grid.is_full()
