# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Short names of commonly used CRC algorithms, e.g. CRC32 or CRC16MODBUS.

The parameters are taken from the catalogue, the comments list the names used
by the catalogue followed by the aliases.
"""
from types import MappingProxyType

from .catalogue import CATALOGUE_PARAMS, CRC_CATALOGUE
from .core import CRCParams
from .errors import UnknownCRCError

_by_name = {e.name: e.params for e in CRC_CATALOGUE}

# CRC-8/SMBUS
CRC8 = _by_name['CRC-8/SMBUS']
CRC8CDMA2000 = _by_name['CRC-8/CDMA2000']
CRC8DARC = _by_name['CRC-8/DARC']
CRC8DVBS2 = _by_name['CRC-8/DVB-S2']
# CRC-8/TECH-3250, CRC-8/AES, CRC-8/EBU
CRC8EBU = _by_name['CRC-8/TECH-3250']
CRC8ICODE = _by_name['CRC-8/I-CODE']
# CRC-8/I-432-1, CRC-8/ITU
CRC8ITU = _by_name['CRC-8/I-432-1']
# CRC-8/MAXIM-DOW, CRC-8/MAXIM, DOW-CRC
CRC8MAXIM = _by_name['CRC-8/MAXIM-DOW']
CRC8ROHC = _by_name['CRC-8/ROHC']
CRC8WCDMA = _by_name['CRC-8/WCDMA']
CRC8AUTOSAR = _by_name['CRC-8/AUTOSAR']
CRC8BLUETOOTH = _by_name['CRC-8/BLUETOOTH']
CRC8GSMA = _by_name['CRC-8/GSM-A']
CRC8GSMB = _by_name['CRC-8/GSM-B']
CRC8HITAG = _by_name['CRC-8/HITAG']
CRC8LTE = _by_name['CRC-8/LTE']
CRC8MIFAREMAD = _by_name['CRC-8/MIFARE-MAD']
CRC8NRSC5 = _by_name['CRC-8/NRSC-5']
CRC8OPENSAFETY = _by_name['CRC-8/OPENSAFETY']
CRC8SAEJ1850 = _by_name['CRC-8/SAE-J1850']

# CRC-16/ARC, ARC, CRC-16, CRC-16/LHA, CRC-IBM
CRC16ARC = _by_name['CRC-16/ARC']
# CRC-16/SPI-FUJITSU, CRC-16/AUG-CCITT
CRC16AUGCCITT = _by_name['CRC-16/SPI-FUJITSU']
# CRC-16/UMTS, CRC-16/BUYPASS, CRC-16/VERIFONE
CRC16BUYPASS = _by_name['CRC-16/UMTS']
# CRC-16/IBM-3740, CRC-16/AUTOSAR, CRC-16/CCITT-FALSE
CRC16CCITTFALSE = _by_name['CRC-16/IBM-3740']
CCITT = CRC16CCITTFALSE
CRC16CDMA2000 = _by_name['CRC-16/CDMA2000']
CRC16DDS110 = _by_name['CRC-16/DDS-110']
# CRC-16/DECT-R, R-CRC-16
CRC16DECTR = _by_name['CRC-16/DECT-R']
# CRC-16/DECT-X, X-CRC-16
CRC16DECTX = _by_name['CRC-16/DECT-X']
CRC16DNP = _by_name['CRC-16/DNP']
CRC16EN13757 = _by_name['CRC-16/EN-13757']
# CRC-16/GENIBUS, CRC-16/DARC, CRC-16/EPC, CRC-16/EPC-C1G2, CRC-16/I-CODE
CRC16GENIBUS = _by_name['CRC-16/GENIBUS']
# CRC-16/KERMIT, CRC-16/BLUETOOTH, CRC-16/CCITT, CRC-16/CCITT-TRUE,
# CRC-16/V-41-LSB, CRC-CCITT, KERMIT
CRC16KERMIT = _by_name['CRC-16/KERMIT']
# CRC-16/MAXIM-DOW, CRC-16/MAXIM
CRC16MAXIM = _by_name['CRC-16/MAXIM-DOW']
CRC16MCRF4XX = _by_name['CRC-16/MCRF4XX']
# CRC-16/MODBUS, MODBUS
CRC16MODBUS = _by_name['CRC-16/MODBUS']
CRC16RIELLO = _by_name['CRC-16/RIELLO']
CRC16T10DIF = _by_name['CRC-16/T10-DIF']
CRC16TELEDISK = _by_name['CRC-16/TELEDISK']
CRC16TMS37157 = _by_name['CRC-16/TMS37157']
CRC16USB = _by_name['CRC-16/USB']
# CRC-16/IBM-SDLC, CRC-16/ISO-HDLC, CRC-16/ISO-IEC-14443-3-B, CRC-16/X-25,
# CRC-B, X-25
CRC16X25 = _by_name['CRC-16/IBM-SDLC']
X25 = CRC16X25
# CRC-16/XMODEM, CRC-16/ACORN, CRC-16/LTE, CRC-16/V-41-MSB, XMODEM, ZMODEM
CRC16XMODEM = _by_name['CRC-16/XMODEM']
# Another set of parameters that is often called "XMODEM"
XMODEM2 = _by_name['XMODEM2']
# CRC-16/ISO-IEC-14443-3-A, CRC-A
CRCA = _by_name['CRC-16/ISO-IEC-14443-3-A']
CRC16CMS = _by_name['CRC-16/CMS']
CRC16GSM = _by_name['CRC-16/GSM']
CRC16LJ1200 = _by_name['CRC-16/LJ1200']
CRC16M17 = _by_name['CRC-16/M17']
CRC16NRSC5 = _by_name['CRC-16/NRSC-5']
CRC16OPENSAFETYA = _by_name['CRC-16/OPENSAFETY-A']
CRC16OPENSAFETYB = _by_name['CRC-16/OPENSAFETY-B']
# CRC-16/PROFIBUS, CRC-16/IEC-61158-2
CRC16PROFIBUS = _by_name['CRC-16/PROFIBUS']

# CRC-32/ISO-HDLC, CRC-32, CRC-32/ADCCP, CRC-32/V-42, CRC-32/XZ, PKZIP
CRC32 = _by_name['CRC-32/ISO-HDLC']
IEEE = CRC32
# CRC-32/BZIP2, CRC-32/AAL5, CRC-32/DECT-B, B-CRC-32
CRC32BZIP2 = _by_name['CRC-32/BZIP2']
CRC32JAMCRC = _by_name['CRC-32/JAMCRC']
CRC32MPEG2 = _by_name['CRC-32/MPEG-2']
# CRC-32/CKSUM, CKSUM, CRC-32/POSIX
CRC32POSIX = _by_name['CRC-32/CKSUM']
CRC32SATA = _by_name['CRC-32/SATA']
CRC32XFER = _by_name['CRC-32/XFER']
# CRC-32/ISCSI, CRC-32/BASE91-C, CRC-32/CASTAGNOLI, CRC-32/INTERLAKEN, CRC-32C
CRC32C = _by_name['CRC-32/ISCSI']
CASTAGNOLI = CRC32C
# CRC-32/BASE91-D, CRC-32D
CRC32D = _by_name['CRC-32/BASE91-D']
# CRC-32/AIXM, CRC-32Q
CRC32Q = _by_name['CRC-32/AIXM']
CRC32AUTOSAR = _by_name['CRC-32/AUTOSAR']
CRC32CDROMEDC = _by_name['CRC-32/CD-ROM-EDC']
CRC32MEF = _by_name['CRC-32/MEF']
# Same polynomial as CRC32MEF but with xorout=0xffffffff.
KOOPMAN = _by_name['KOOPMAN']

# CRC-64/GO-ISO
CRC64ISO = _by_name['CRC-64/GO-ISO']
# CRC-64/XZ, CRC-64/GO-ECMA
CRC64ECMA = _by_name['CRC-64/XZ']

del _by_name

_NAMES = (
    'CRC8', 'CRC8CDMA2000', 'CRC8DARC', 'CRC8DVBS2', 'CRC8EBU', 'CRC8ICODE',
    'CRC8ITU', 'CRC8MAXIM', 'CRC8ROHC', 'CRC8WCDMA', 'CRC8AUTOSAR',
    'CRC8BLUETOOTH', 'CRC8GSMA', 'CRC8GSMB', 'CRC8HITAG', 'CRC8LTE',
    'CRC8MIFAREMAD', 'CRC8NRSC5', 'CRC8OPENSAFETY', 'CRC8SAEJ1850',

    'CRC16ARC', 'CRC16AUGCCITT', 'CRC16BUYPASS', 'CRC16CCITTFALSE', 'CCITT',
    'CRC16CDMA2000', 'CRC16DDS110', 'CRC16DECTR', 'CRC16DECTX', 'CRC16DNP',
    'CRC16EN13757', 'CRC16GENIBUS', 'CRC16KERMIT', 'CRC16MAXIM',
    'CRC16MCRF4XX', 'CRC16MODBUS', 'CRC16RIELLO', 'CRC16T10DIF',
    'CRC16TELEDISK', 'CRC16TMS37157', 'CRC16USB', 'CRC16X25', 'X25',
    'CRC16XMODEM', 'XMODEM2', 'CRCA', 'CRC16CMS', 'CRC16GSM', 'CRC16LJ1200',
    'CRC16M17', 'CRC16NRSC5', 'CRC16OPENSAFETYA', 'CRC16OPENSAFETYB',
    'CRC16PROFIBUS',

    'CRC32', 'IEEE', 'CRC32BZIP2', 'CRC32JAMCRC', 'CRC32MPEG2', 'CRC32POSIX',
    'CRC32SATA', 'CRC32XFER', 'CRC32C', 'CASTAGNOLI', 'CRC32D', 'CRC32Q',
    'CRC32AUTOSAR', 'CRC32CDROMEDC', 'CRC32MEF', 'KOOPMAN',

    'CRC64ISO', 'CRC64ECMA',
)

__all__ = _NAMES + ('PARAMETERS', 'get_parameters', 'get_parameters_name')

# Name -> parameters. Aliases (IEEE, CCITT, X25, CASTAGNOLI) come after the
# canonical name of the same parameters.
PARAMETERS = MappingProxyType({name: globals()[name] for name in _NAMES})


def get_parameters(name: str) -> CRCParams:
    """ Case insensitive lookup of CRC parameters. Accepts the short names
    (e.g. "CRC16MODBUS") and the names and aliases of the catalogue
    (e.g. "CRC-16/MODBUS" or "MODBUS"). """
    key = name.strip().upper()
    params = PARAMETERS.get(key) or CATALOGUE_PARAMS.get(key)
    if params is None:
        raise UnknownCRCError('unknown CRC type: %r' % name)
    return params


def get_parameters_name(params: CRCParams) -> str:
    """ Returns the short name of the parameters. Parameters that have more
    than one name resolve to the canonical one, e.g. IEEE to CRC32. """
    for name, p in PARAMETERS.items():
        if p == params:
            return name
    raise UnknownCRCError('parameters not from known list: %s' % (params,))
