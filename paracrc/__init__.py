# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Parametric CRC calculator for CRCs from 1 to 64 bits wide.

Any CRC algorithm that can be described by the parameters of the Williams
model (width, poly, init, refin, refout, xorout) can be calculated, including
those that aren't 8, 16, 32 or 64 bits wide, for example CRC-5/USB.

    >>> import paracrc
    >>> hex(paracrc.calculate_crc(paracrc.CRC32, b'123456789'))
    '0xcbf43926'
    >>> h = paracrc.new('CRC-16/MODBUS')
    >>> h.update(b'1234')
    >>> h.update(b'56789')
    >>> hex(h.crc())
    '0x4b37'
"""
from .catalogue import (CATALOGUE_PARAMS, CRC_CATALOGUE, CatalogueEntry,
                        load_catalogue, parse_crc_catalogue, parse_crc_params)
from .codec import (append_crc, crc_bytes, crc_to_bytes, split_crc,
                    verify_appended, verify_crc)
from .core import CRCParams, calculate_crc, reflect_bits
from .crchash import CRCHash
from .errors import CRCError, CRCInputError, CRCParamsError, UnknownCRCError
from .registry import *  # noqa: F401,F403 named parameters and lookup
from .table import CRCTable, build_table, get_table

__version__ = '1.0.0'


def new(crc, data: bytes = b'') -> CRCHash:
    """ Creates a CRCHash. crc is either a CRCParams object or a name that
    get_parameters() accepts. """
    params = get_parameters(crc) if isinstance(crc, str) else crc
    return CRCHash(get_table(params), data)
