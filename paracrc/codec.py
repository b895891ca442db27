# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Helpers that append a CRC to a piece of data and check the appended CRC.

The CRC is stored in the smallest number of bytes that can hold it,
least significant byte first.
"""
from .core import CRCParams
from .table import get_table


def crc_to_bytes(params: CRCParams, crc: int) -> bytes:
    return crc.to_bytes(params.byte_size, 'little')


def crc_bytes(params: CRCParams, data: bytes) -> bytes:
    return crc_to_bytes(params, get_table(params).calculate_crc(data))


def append_crc(params: CRCParams, data: bytes) -> bytes:
    return bytes(data) + crc_bytes(params, data)


def verify_crc(params: CRCParams, data: bytes, checksum: bytes) -> bool:
    """ Returns True if checksum is the serialized CRC of data. A checksum of
    the wrong length is never valid. """
    if len(checksum) != params.byte_size:
        return False
    return crc_bytes(params, data) == bytes(checksum)


def split_crc(params: CRCParams, frame: bytes) -> (bytes, bytes):
    """ Splits the output of append_crc() into data and checksum. """
    n = params.byte_size
    if len(frame) < n:
        return bytes(frame), b''
    return bytes(frame[:len(frame)-n]), bytes(frame[len(frame)-n:])


def verify_appended(params: CRCParams, frame: bytes) -> bool:
    data, checksum = split_crc(params, frame)
    return verify_crc(params, data, checksum)
