# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Incremental CRC calculation with an interface similar to the hash objects of
the hashlib module.
"""
from .table import CRCTable


class CRCHash:
    """ Running CRC calculation over a shared CRCTable.

    The table is only read, the register is owned by the CRCHash object.
    Feeding the same bytes in any number of update() calls gives the same
    result as one call with all of the data. A single CRCHash must not be
    updated from multiple threads without locking. """

    block_size = 1

    def __init__(self, table: CRCTable, data: bytes = b'', *, interim: int = None):
        self._table = table
        self._digest_size = table.params.byte_size
        self._crc = table.init_crc() if interim is None else interim
        if data:
            self.update(data)

    @property
    def table(self) -> CRCTable:
        return self._table

    @property
    def params(self):
        return self._table.params

    @property
    def digest_size(self) -> int:
        """ The number of bytes returned by digest(): ceil(width / 8) """
        return self._digest_size

    @property
    def interim(self) -> int:
        """ The raw register value that can be passed to CRCTable.crc() or
        CRCTable.update_crc() to continue the calculation elsewhere. """
        return self._crc

    def reset(self):
        self._crc = self._table.init_crc()

    def update(self, data: bytes):
        self._crc = self._table.update_crc(self._crc, data)

    def write(self, data: bytes) -> int:
        self.update(data)
        return len(data)

    def crc(self) -> int:
        """ Returns the CRC of the data processed so far without changing the
        state of the calculation. """
        return self._table.crc(self._crc)

    def digest(self) -> bytes:
        return self.crc().to_bytes(self._digest_size, 'big')

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'CRCHash':
        return CRCHash(self._table, interim=self._crc)

    def calculate_crc(self, data: bytes) -> int:
        """ One-shot calculation with the table of this object. Leaves the
        running calculation untouched. """
        return self._table.calculate_crc(data)

    def __repr__(self):
        return '<CRCHash {} crc=0x{:0{w}x}>'.format(
            self.params, self.crc(), w=self._digest_size*2)
