# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Table driven CRC calculation.

A CRCTable is built once per CRC algorithm by running the reference algorithm
over every possible input byte. After that the input can be processed a whole
byte at a time. The table is immutable so any number of calculations (and
CRCHash objects) can share it.
"""
import functools

from .core import CRCParams, U64_MASK, calculate_crc, reflect_bits


class CRCTable:
    __slots__ = ('_params', '_entries', '_mask', '_init_value')

    def __init__(self, params: CRCParams):
        params = CRCParams(*params)
        init_value = params.init
        if params.refin:
            init_value = reflect_bits(params.init, params.width)

        # With refout==refin the contribution of each byte is calculated in
        # the same bit order as the register we feed it into.
        table_params = params._replace(init=0, xorout=0, refout=params.refin)
        self._entries = tuple(calculate_crc(table_params, (i,))
                              for i in range(256))
        self._params = params
        self._mask = params.mask
        self._init_value = init_value

    @property
    def params(self) -> CRCParams:
        return self._params

    @property
    def entries(self) -> tuple:
        return self._entries

    @property
    def mask(self) -> int:
        return self._mask

    @property
    def init_value(self) -> int:
        return self._init_value

    def __eq__(self, other):
        if not isinstance(other, CRCTable):
            return NotImplemented
        return self._params == other._params

    def __hash__(self):
        return hash(self._params)

    def __repr__(self):
        return 'CRCTable({!r})'.format(self._params)

    def init_crc(self) -> int:
        """ Returns the register value a new CRC calculation starts with. """
        return self._init_value

    def update_crc(self, crc: int, data: bytes) -> int:
        """ Processes data and returns the updated (interim) register value.
        Call it repeatedly to process the input in chunks. The result doesn't
        depend on how the input is split into chunks. """
        t = self._entries
        width = self._params.width
        if self._params.refin:
            for b in data:
                crc = t[(crc ^ b) & 0xff] ^ (crc >> 8)
        elif width < 8:
            # the register is aligned to the top of the table index
            shift = 8 - width
            for b in data:
                crc = t[((crc << shift) ^ b) & 0xff] ^ ((crc << 8) & U64_MASK)
        else:
            shift = width - 8
            for b in data:
                crc = t[((crc >> shift) ^ b) & 0xff] ^ ((crc << 8) & U64_MASK)
        return crc

    def crc(self, crc: int) -> int:
        """ Turns an interim register value into the final CRC. """
        p = self._params
        # The table already has a reflection stage when refin==true.
        if p.refout != p.refin:
            crc = reflect_bits(crc, p.width)
        return (crc ^ p.xorout) & self._mask

    def calculate_crc(self, data: bytes) -> int:
        return self.crc(self.update_crc(self._init_value, data))


def build_table(params: CRCParams) -> CRCTable:
    return CRCTable(params)


@functools.lru_cache(maxsize=128)
def get_table(params: CRCParams) -> CRCTable:
    """ Same as build_table() but builds only one table per distinct set of
    parameters and hands out that to subsequent callers. """
    return CRCTable(params)
