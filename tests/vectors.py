"""
Test strings and expected CRC values shared by the tests.
"""
from paracrc import registry as r
from paracrc.core import CRCParams

LONG_TEXT = (
    b'Whenever digital data is stored or interfaced, data corruption might '
    b'occur. Since the beginning of computer science, people have been '
    b'thinking of ways to deal with this type of problem. For serial data they '
    b'came up with the solution to attach a parity bit to each sent byte. This '
    b'simple detection mechanism works if an odd number of bits in a byte '
    b'changes, but an even number of false bits in one byte will not be '
    b'detected by the parity check. To overcome this problem people have '
    b'searched for mathematical sound mechanisms to detect multiple false bits.'
)

TEST_STRINGS = (
    b'123456789',
    b'12345678901234567890',
    b'Introduction on CRC calculations',
    LONG_TEXT,
)

TEST_ARRAY = bytes(range(256))

# Expected CRCs of the TEST_STRINGS, None where there is no known value.
NAMED_VECTORS = [
    ('CRC8', r.CRC8, (0xF4, 0x56, 0x58, 0x83)),
    ('CRC8CDMA2000', r.CRC8CDMA2000, (0xDA, 0x36, 0xAB, 0xD3)),
    ('CRC8DARC', r.CRC8DARC, (0x15, 0x1B, 0xBF, 0x3D)),
    ('CRC8DVBS2', r.CRC8DVBS2, (0xBC, 0x99, 0xA4, 0x86)),
    ('CRC8EBU', r.CRC8EBU, (0x97, 0x7B, 0x72, 0xE1)),
    ('CRC8ICODE', r.CRC8ICODE, (0x7E, 0xBF, 0x76, 0xFD)),
    ('CRC8ITU', r.CRC8ITU, (0xA1, 0x03, 0x0D, 0xD6)),
    ('CRC8MAXIM', r.CRC8MAXIM, (0xA1, 0x18, 0x45, 0x3D)),
    ('CRC8ROHC', r.CRC8ROHC, (0xD0, 0xA6, 0x1F, 0x7A)),
    ('CRC8WCDMA', r.CRC8WCDMA, (0x25, 0x95, 0x61, 0x64)),
    ('CRC8AUTOSAR', r.CRC8AUTOSAR, (0xDF, 0x74, 0xAB, 0x7A)),
    ('CRC8BLUETOOTH', r.CRC8BLUETOOTH, (0x26, 0xE4, 0xA8, 0x8C)),
    ('CRC8GSMA', r.CRC8GSMA, (0x37, None, None, None)),
    ('CRC8GSMB', r.CRC8GSMB, (0x94, 0x72, 0xA4, 0xCE)),
    ('CRC8HITAG', r.CRC8HITAG, (0xB4, None, None, None)),
    ('CRC8LTE', r.CRC8LTE, (0xEA, None, None, None)),
    ('CRC8MIFAREMAD', r.CRC8MIFAREMAD, (0x99, None, None, None)),
    ('CRC8NRSC5', r.CRC8NRSC5, (0xF7, None, None, None)),
    ('CRC8OPENSAFETY', r.CRC8OPENSAFETY, (0x3E, None, None, None)),
    ('CRC8SAEJ1850', r.CRC8SAEJ1850, (0x4B, 0x91, 0x8D, 0x41)),

    ('CRC16ARC', r.CRC16ARC, (0xBB3D, 0x9B37, 0x728A, 0x1EB5)),
    ('CRC16AUGCCITT', r.CRC16AUGCCITT, (0xE5CC, 0xB33D, 0x908A, 0x0209)),
    ('CRC16BUYPASS', r.CRC16BUYPASS, (0xFEE8, 0xC2F4, 0xAC80, 0x4688)),
    ('CRC16CCITTFALSE', r.CRC16CCITTFALSE, (0x29B1, 0xDA31, 0xC87E, 0xD6ED)),
    ('CRC16CDMA2000', r.CRC16CDMA2000, (0x4C06, 0xBC63, 0xB4DD, 0x8B13)),
    ('CRC16DDS110', r.CRC16DDS110, (0x9ECF, 0x1824, 0xAC7C, 0x319F)),
    ('CRC16DECTR', r.CRC16DECTR, (0x007E, 0x6F58, 0x5240, 0xE9D5)),
    ('CRC16DECTX', r.CRC16DECTX, (0x007F, 0x6F59, 0x5241, 0xE9D4)),
    ('CRC16DNP', r.CRC16DNP, (0xEA82, 0x745F, 0x035B, 0x8933)),
    ('CRC16EN13757', r.CRC16EN13757, (0xC2B7, 0xAD9D, 0xCD00, 0xA5FD)),
    ('CRC16GENIBUS', r.CRC16GENIBUS, (0xD64E, 0x25CE, 0x3781, 0x2912)),
    ('CRC16KERMIT', r.CRC16KERMIT, (0x2189, 0x4016, 0x34C6, 0x4157)),
    ('CRC16MAXIM', r.CRC16MAXIM, (0x44C2, 0x64C8, 0x8D75, 0xE14A)),
    ('CRC16MCRF4XX', r.CRC16MCRF4XX, (0x6F91, 0x5D79, 0x0649, 0x974E)),
    ('CRC16MODBUS', r.CRC16MODBUS, (0x4B37, 0x8013, 0xE68B, 0xFFDF)),
    ('CRC16RIELLO', r.CRC16RIELLO, (0x63D0, 0x1C58, 0x3038, 0x44F2)),
    ('CRC16T10DIF', r.CRC16T10DIF, (0xD0DB, 0x1A0D, 0xCD63, 0xBF32)),
    ('CRC16TELEDISK', r.CRC16TELEDISK, (0x0FB3, 0xC503, 0x776E, 0xA357)),
    ('CRC16TMS37157', r.CRC16TMS37157, (0x26B1, 0xAB86, 0x7053, 0x2533)),
    ('CRC16USB', r.CRC16USB, (0xB4C8, 0x7FEC, 0x1974, 0x0020)),
    ('CRC16X25', r.CRC16X25, (0x906E, 0xA286, 0xF9B6, 0x68B1)),
    ('CRC16XMODEM', r.CRC16XMODEM, (0x31C3, 0x2C89, 0x3932, 0x4E86)),
    ('XMODEM2', r.XMODEM2, (0x0C73, 0x122E, 0x0638, 0x187A)),
    ('CRCA', r.CRCA, (0xBF05, 0xC1AD, 0xEEE6, 0x7A71)),
    ('CRC16CMS', r.CRC16CMS, (0xAEE7, None, None, None)),
    ('CRC16GSM', r.CRC16GSM, (0xCE3C, None, None, None)),
    ('CRC16LJ1200', r.CRC16LJ1200, (0xBDF4, None, None, None)),
    ('CRC16M17', r.CRC16M17, (0x772B, None, None, None)),
    ('CRC16NRSC5', r.CRC16NRSC5, (0xA066, None, None, None)),
    ('CRC16OPENSAFETYA', r.CRC16OPENSAFETYA, (0x5D38, None, None, None)),
    ('CRC16OPENSAFETYB', r.CRC16OPENSAFETYB, (0x20FE, None, None, None)),
    ('CRC16PROFIBUS', r.CRC16PROFIBUS, (0xA819, 0x3D0B, 0x047A, 0xFF77)),

    ('CRC32', r.CRC32, (0xCBF43926, 0x906319F2, 0x814F2B45, 0x8F273817)),
    ('CRC32BZIP2', r.CRC32BZIP2, (0xFC891918, 0x47D3AC25, 0x05ACC4EE, 0xBB6BB3F9)),
    ('CRC32JAMCRC', r.CRC32JAMCRC, (0x340BC6D9, 0x6F9CE60D, 0x7EB0D4BA, 0x70D8C7E8)),
    ('CRC32MPEG2', r.CRC32MPEG2, (0x0376E6E7, 0xB82C53DA, 0xFA533B11, 0x44944C06)),
    ('CRC32POSIX', r.CRC32POSIX, (0x765E7680, 0x09F5F82A, 0x4FF96B89, 0x54E6B1BB)),
    ('CRC32SATA', r.CRC32SATA, (0xCF72AFE8, 0x4426E87D, 0xCA7E8932, 0x7D81662A)),
    ('CRC32XFER', r.CRC32XFER, (0xBD0BE338, 0x326A653D, 0x5D470C48, 0x9001FA5D)),
    ('CRC32C', r.CRC32C, (0xE3069283, 0xA8B4A6B9, 0x54F98A9E, 0x864FDAFC)),
    ('CRC32D', r.CRC32D, (0x87315576, 0xF2D28B69, 0x231CB16A, 0xBEB35C2D)),
    ('CRC32Q', r.CRC32Q, (0x3010BF7F, 0x59F2D11A, 0xDBE0EEB1, 0x4ED076AE)),
    ('KOOPMAN', r.KOOPMAN, (0x2D3DD0AE, 0xCC53DEAC, 0x1B8101F9, 0xA41634B2)),
    ('CRC32AUTOSAR', r.CRC32AUTOSAR, (0x1697D06A, None, None, None)),
    ('CRC32CDROMEDC', r.CRC32CDROMEDC, (0x6EC2EDC4, None, None, None)),
    ('CRC32MEF', r.CRC32MEF, (0xD2C22F51, None, None, None)),

    ('CRC64ISO', r.CRC64ISO, (0xB90956C775A41001, 0x8DB93749FB37B446,
                              0xBAA81A1ED1A9209B, 0x347969424A1A7628)),
    ('CRC64ECMA', r.CRC64ECMA, (0x995DC9BBDF1939FA, 0x0DA1B82EF5085A4A,
                                0xCF8C40119AE90DCB, 0x31610F76CFB272A5)),
]

# (params, data, expected crc)
PARAM_VECTORS = [
    (CRCParams(3, 0x03, 0x00, False, False, 0x7), b'123456789', 0x04),  # CRC-3/GSM
    (CRCParams(3, 0x03, 0x00, False, False, 0x7), LONG_TEXT, 0x06),
    (CRCParams(3, 0x03, 0x00, False, False, 0x7), TEST_ARRAY, 0x02),
    (CRCParams(3, 0x03, 0x07, True, True, 0x0), b'123456789', 0x06),  # CRC-3/ROHC
    (CRCParams(3, 0x03, 0x07, True, True, 0x0), LONG_TEXT, 0x03),
    (CRCParams(4, 0x03, 0x00, True, True, 0x0), b'123456789', 0x07),  # CRC-4/ITU
    (CRCParams(4, 0x03, 0x0f, False, False, 0xf), b'123456789', 0x0b),  # CRC-4/INTERLAKEN
    (CRCParams(4, 0x03, 0x0f, False, False, 0xf), LONG_TEXT, 0x01),
    (CRCParams(4, 0x03, 0x0f, False, False, 0xf), TEST_ARRAY, 0x07),
    (CRCParams(5, 0x09, 0x09, False, False, 0x0), b'123456789', 0x00),  # CRC-5/EPC
    (CRCParams(5, 0x15, 0x00, True, True, 0x0), b'123456789', 0x07),  # CRC-5/ITU
    (CRCParams(6, 0x27, 0x3f, False, False, 0x0), b'123456789', 0x0d),  # CRC-6/CDMA2000-A
    (CRCParams(6, 0x07, 0x3f, False, False, 0x0), b'123456789', 0x3b),  # CRC-6/CDMA2000-B
    (CRCParams(6, 0x07, 0x3f, False, False, 0x0), TEST_ARRAY, 0x24),
    (CRCParams(7, 0x09, 0x00, False, False, 0x0), b'123456789', 0x75),  # CRC-7
    (CRCParams(7, 0x09, 0x00, False, False, 0x0), TEST_ARRAY, 0x78),
    (CRCParams(7, 0x4f, 0x7f, True, True, 0x0), b'123456789', 0x53),  # CRC-7/ROHC
    (CRCParams(8, 0x07, 0x00, False, False, 0x00), b'123456789', 0xf4),  # CRC-8
    (CRCParams(8, 0xa7, 0x00, True, True, 0x00), b'123456789', 0x26),  # CRC-8/BLUETOOTH
    (CRCParams(8, 0x07, 0x00, False, False, 0x55), b'123456789', 0xa1),  # CRC-8/ITU
    (CRCParams(8, 0x9b, 0x00, True, True, 0x00), b'123456789', 0x25),  # CRC-8/WCDMA
    (CRCParams(8, 0x31, 0x00, True, True, 0x00), b'123456789', 0xa1),  # CRC-8/MAXIM
    (CRCParams(10, 0x233, 0x000, False, False, 0x000), b'123456789', 0x199),  # CRC-10
    (CRCParams(12, 0xd31, 0x00, False, False, 0xfff), b'123456789', 0x0b34),  # CRC-12/GSM
    (CRCParams(12, 0x80f, 0x00, False, True, 0x00), b'123456789', 0x0daf),  # CRC-12/UMTS
    (CRCParams(13, 0x1cf5, 0x00, False, False, 0x00), b'123456789', 0x04fa),  # CRC-13/BBC
    (CRCParams(14, 0x0805, 0x00, True, True, 0x00), b'123456789', 0x082d),  # CRC-14/DARC
    (CRCParams(14, 0x202d, 0x00, False, False, 0x3fff), b'123456789', 0x30ae),  # CRC-14/GSM
    (CRCParams(15, 0x4599, 0x00, False, False, 0x00), b'123456789', 0x059e),  # CRC-15
    (CRCParams(15, 0x4599, 0x00, False, False, 0x00), LONG_TEXT, 0x2857),
    (CRCParams(15, 0x6815, 0x00, False, False, 0x0001), b'123456789', 0x2566),  # CRC-15/MPT1327
    (CRCParams(21, 0x102899, 0x000000, False, False, 0x000000), b'123456789', 0x0ed841),  # CRC-21/CAN-FD
    (CRCParams(24, 0x864cfb, 0xb704ce, False, False, 0x000000), b'123456789', 0x21cf02),  # CRC-24
    (CRCParams(24, 0x5d6dcb, 0xfedcba, False, False, 0x000000), b'123456789', 0x7979bd),  # CRC-24/FLEXRAY-A
    (CRCParams(24, 0x00065b, 0x555555, True, True, 0x000000), b'123456789', 0xc25a56),  # CRC-24/BLE
    (CRCParams(31, 0x04c11db7, 0x7fffffff, False, False, 0x7fffffff), b'123456789', 0x0ce9e46c),  # CRC-31/PHILIPS
]


def named_cases():
    """ Flattens NAMED_VECTORS into (name, params, data, crc) tuples. """
    for name, params, crcs in NAMED_VECTORS:
        for data, crc in zip(TEST_STRINGS, crcs):
            if crc is not None:
                yield name, params, data, crc
