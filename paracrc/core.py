# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Parameter sets and the bit-by-bit reference CRC algorithm.

The parameters follow the model proposed in "A PAINLESS GUIDE TO CRC ERROR
DETECTION ALGORITHMS" by Ross N. Williams and used by the CRC catalogue of the
RevEng project: https://reveng.sourceforge.io/crc-catalogue/all.htm
"""
from typing import NamedTuple

# The CRC register is emulated as a 64-bit unsigned integer.
U64_MASK = (1 << 64) - 1


class CRCParams(NamedTuple):
    """ Parameters of a CRC algorithm in the format used by the RevEng CRC
    catalogue. poly, init and xorout are the unreflected (MSB-first) values.

    Precondition: 1 <= width <= 64. This isn't checked here, only the
    parsers of the catalogue module validate their input. """
    width: int
    poly: int
    init: int = 0
    refin: bool = False
    refout: bool = False
    xorout: int = 0

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def byte_size(self) -> int:
        """ The smallest number of bytes that can hold a CRC value. """
        return (self.width + 7) // 8

    def __str__(self):
        return ('width={} poly=0x{:0{w}x} init=0x{:0{w}x} refin={} refout={} '
                'xorout=0x{:0{w}x}'.format(
                    self.width, self.poly, self.init, str(self.refin).lower(),
                    str(self.refout).lower(), self.xorout,
                    w=(self.width+3)//4))


def reflect_bits(value: int, count: int) -> int:
    """ Reverses the order of the lowest count bits of value. The bits above
    them are left untouched. """
    if count <= 0:
        return value
    low = value & ((1 << count) - 1)
    return (value ^ low) | int('{v:0{w}b}'.format(v=low, w=count)[::-1], 2)


reflected_int8_bits = tuple(reflect_bits(i, 8) for i in range(256))


def calculate_crc(params: CRCParams, data: bytes) -> int:
    """ Straightforward bit by bit CRC calculation.

    It is slow for large amounts of data but needs no preparation. The faster
    and better known variant of the algorithm shifts whole bytes into the
    register and that doesn't work with polynomials narrower than 8 bits, so
    this one is the reference that the table driven implementation is built
    from and tested against. """
    width, poly = params.width, params.poly
    top_bit = 1 << (width - 1)
    mask = (top_bit << 1) - 1

    crc = params.init
    for b in data:
        if params.refin:
            b = reflected_int8_bits[b]
        for j in (0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01):
            bit = crc & top_bit
            crc = (crc << 1) & U64_MASK
            if b & j:
                bit ^= top_bit
            if bit:
                crc ^= poly

    if params.refout:
        crc = reflect_bits(crc, width)
    return (crc ^ params.xorout) & mask
