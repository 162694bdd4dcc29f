"""Precomputed bit masks for a 3x3 board.

Bits 0-8 mark X cells, bits 9-17 O cells, bits 18-26 empty cells.
"""

ONE_AWAY_X = (
    0b00000000000010000000000000000101,
    0b00000000000100000000000000000011,
    0b00000000000001000000000000000110,
    0b00000000010000000000000000101000,
    0b00000000001000000000000000110000,
    0b00000000100000000000000000011000,
    0b00000010000000000000000101000000,
    0b00000100000000000000000011000000,
    0b00000001000000000000000110000000,
    0b00000001000000000000000000001001,
    0b00000000000001000000000001001000,
    0b00000000001000000000000001000001,
    0b00000010000000000000000000010010,
    0b00000000000010000000000010010000,
    0b00000000010000000000000010000010,
    0b00000100000000000000000000100100,
    0b00000000000100000000000100100000,
    0b00000000100000000000000100000100,
    0b00000100000000000000000000010001,
    0b00000000010000000000000100000001,
    0b00000000000001000000000100010000,
    0b00000000000100000000000001010000,
    0b00000000010000000000000001000100,
    0b00000001000000000000000000010100,
)

ONE_AWAY_O = (
    0b00000000000010000000101000000000,
    0b00000000000100000000011000000000,
    0b00000000000001000000110000000000,
    0b00000000010000000101000000000000,
    0b00000000001000000110000000000000,
    0b00000000100000000011000000000000,
    0b00000010000000101000000000000000,
    0b00000100000000011000000000000000,
    0b00000001000000110000000000000000,
    0b00000001000000000001001000000000,
    0b00000000000001001001000000000000,
    0b00000000001000001000001000000000,
    0b00000010000000000010010000000000,
    0b00000000000010010010000000000000,
    0b00000000010000010000010000000000,
    0b00000100000000000100100000000000,
    0b00000000000100100100000000000000,
    0b00000000100000100000100000000000,
    0b00000100000000000010001000000000,
    0b00000000010000100000001000000000,
    0b00000000000001100010000000000000,
    0b00000000000100001010000000000000,
    0b00000000010000001000100000000000,
    0b00000001000000000010100000000000,
)

WON_BY_X = (
    0b00000000000000000000000000000111,
    0b00000000000000000000000000111000,
    0b00000000000000000000000111000000,
    0b00000000000000000000000001001001,
    0b00000000000000000000000010010010,
    0b00000000000000000000000100100100,
    0b00000000000000000000000100010001,
    0b00000000000000000000000001010100,
)

WON_BY_O = (
    0b00000000000000000000111000000000,
    0b00000000000000000111000000000000,
    0b00000000000000111000000000000000,
    0b00000000000000001001001000000000,
    0b00000000000000010010010000000000,
    0b00000000000000100100100000000000,
    0b00000000000000100010001000000000,
    0b00000000000000001010100000000000,
)

POSSIBLE_TO_WIN = (
    0b00000000000111000000000000000000,
    0b00000000000110000000000000000001,
    0b00000000000011000000000000000100,
    0b00000000000010000000000000000101,
    0b00000000000110000000001000000000,
    0b00000000000011000000100000000000,
    0b00000000000010000000101000000000,
    0b00000000000100000000000000000011,
    0b00000000000001000000000000000110,
    0b00000000000100000000011000000000,
    0b00000000000001000000110000000000,
    0b00000000111000000000000000000000,
    0b00000000110000000000000000001000,
    0b00000000011000000000000000100000,
    0b00000000010000000000000000101000,
    0b00000000110000000001000000000000,
    0b00000000011000000100000000000000,
    0b00000000010000000101000000000000,
    0b00000000100000000000000000011000,
    0b00000000001000000000000000110000,
    0b00000000100000000011000000000000,
    0b00000000001000000110000000000000,
    0b00000111000000000000000000000000,
    0b00000110000000000000000001000000,
    0b00000011000000000000000100000000,
    0b00000010000000000000000101000000,
    0b00000110000000001000000000000000,
    0b00000011000000100000000000000000,
    0b00000010000000101000000000000000,
    0b00000100000000000000000011000000,
    0b00000001000000000000000110000000,
    0b00000100000000011000000000000000,
    0b00000001000000110000000000000000,
    0b00000001001001000000000000000000,
    0b00000001001000000000000000000001,
    0b00000000001001000000000001000000,
    0b00000000001000000000000001000001,
    0b00000001001000000000001000000000,
    0b00000000001001001000000000000000,
    0b00000000001000001000001000000000,
    0b00000001000000000000000000001001,
    0b00000000000001000000000001001000,
    0b00000001000000000001001000000000,
    0b00000000000001001001000000000000,
    0b00000010010010000000000000000000,
    0b00000010010000000000000000000010,
    0b00000000010010000000000010000000,
    0b00000000010000000000000010000010,
    0b00000010010000000000010000000000,
    0b00000000010010010000000000000000,
    0b00000000010000010000010000000000,
    0b00000010000000000000000000010010,
    0b00000000000010000000000010010000,
    0b00000010000000000010010000000000,
    0b00000000000010010010000000000000,
    0b00000100100100000000000000000000,
    0b00000100100000000000000000000100,
    0b00000000100100000000000100000000,
    0b00000000100000000000000100000100,
    0b00000100100000000000100000000000,
    0b00000000100100100000000000000000,
    0b00000000100000100000100000000000,
    0b00000100000000000000000000100100,
    0b00000000000100000000000100100000,
    0b00000100000000000100100000000000,
    0b00000000000100100100000000000000,
    0b00000100010001000000000000000000,
    0b00000100010000000000000000000001,
    0b00000000010001000000000100000000,
    0b00000000010000000000000100000001,
    0b00000100010000000000001000000000,
    0b00000000010001100000000000000000,
    0b00000000010000100000001000000000,
    0b00000100000000000000000000010001,
    0b00000000000001000000000100010000,
    0b00000100000000000010001000000000,
    0b00000000000001100010000000000000,
    0b00000001010100000000000000000000,
    0b00000001010000000000000000000100,
    0b00000000010100000000000001000000,
    0b00000000010000000000000001000100,
    0b00000001010000000000100000000000,
    0b00000000010100001000000000000000,
    0b00000000010000001000100000000000,
    0b00000001000000000000000000010100,
    0b00000000000100000000000001010000,
    0b00000001000000000010100000000000,
    0b00000000000100001010000000000000,
)