"""
Bitboard utilities for tic-tac-toe.

Board layout (3 x 3 = 9 squares, row-major):

  0 | 1 | 2
  ---------
  3 | 4 | 5
  ---------
  6 | 7 | 8

Square index = row * size + col
"""

from typing import Iterator

# Board dimensions
SIZE = 3
NUM_SQUARES = SIZE * SIZE  # 9

# Mask with every square set
FULL_MASK = (1 << NUM_SQUARES) - 1


def sq_to_rowcol(sq: int, size: int = SIZE) -> tuple[int, int]:
    """Convert square index to (row, col)."""
    return sq // size, sq % size


def rowcol_to_sq(row: int, col: int, size: int = SIZE) -> int:
    """Convert (row, col) to square index."""
    return row * size + col


def bit(sq: int) -> int:
    """Return bitboard with single bit set at square."""
    return 1 << sq


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(bb).count('1')


def full_mask(size: int) -> int:
    """Mask covering all size * size squares."""
    return (1 << (size * size)) - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Iterate over indices of set bits, lowest first."""
    bb = int(bb)  # Handle numpy ints
    while bb:
        low = bb & -bb
        yield low.bit_length() - 1
        bb ^= low


def build_win_masks(size: int) -> list[int]:
    """
    Build the winning lines for a size x size board.

    Order: size rows (top to bottom), size columns (left to right),
    the descending diagonal, then the ascending diagonal.
    """
    masks = []

    # Rows
    mask = (1 << size) - 1
    for _ in range(size):
        masks.append(mask)
        mask <<= size

    # Columns
    mask = 0
    for _ in range(size):
        mask = (mask << size) | 1
    for _ in range(size):
        masks.append(mask)
        mask <<= 1

    # Descending diagonal (0, size + 1, ...)
    mask = 0
    for _ in range(size):
        mask = (mask << (size + 1)) | 1
    masks.append(mask)

    # Ascending diagonal, shifted so its first bit lands on the top-right square
    mask = 0
    for _ in range(size):
        mask = (mask << (size - 1)) | 1
    masks.append(mask << (size - 1))

    return masks

