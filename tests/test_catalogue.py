"""
Tests for the catalogue parser and every algorithm of the builtin catalogue.
"""
import pytest

from paracrc.catalogue import (CATALOGUE_PARAMS, CRC_CATALOGUE, CatalogueEntry,
                               catalogue_index, load_catalogue,
                               parse_crc_catalogue, parse_crc_params)
from paracrc.core import CRCParams, calculate_crc
from paracrc.crchash import CRCHash
from paracrc.errors import CRCParamsError
from paracrc.table import get_table


class TestParseCRCParams:

    def test_full_line(self):
        e = parse_crc_params(
            'width=16 poly=0x8005 init=0xffff refin=true refout=true '
            'xorout=0x0000 check=0x4b37 residue=0x0000 name="CRC-16/MODBUS" '
            'alias="MODBUS"')
        assert e == CatalogueEntry(
            name='CRC-16/MODBUS',
            params=CRCParams(16, 0x8005, 0xFFFF, True, True, 0),
            check=0x4B37, residue=0, aliases=('MODBUS',))

    def test_defaults(self):
        e = parse_crc_params('width=8 poly=0x07')
        assert e.params == CRCParams(8, 0x07, 0, False, False, 0)
        assert e.name == 'CUSTOM'
        assert e.check is None and e.residue is None and e.aliases == ()

    def test_multiple_aliases(self):
        e = parse_crc_params('width=8 poly=0x1d init=0xff refin=True refout=TRUE '
                             'alias="CRC-8/AES,CRC-8/EBU"')
        assert e.aliases == ('CRC-8/AES', 'CRC-8/EBU')
        assert e.params.refin and e.params.refout

    def test_decimal_values(self):
        assert parse_crc_params('width=5 poly=21').params.poly == 0x15

    @pytest.mark.parametrize('line', [
        'poly=0x07',
        'width=8',
        'width=8 poly=0x07 foo=1',
        'width=8 poly=0x07 refin=yes',
        'width=8 poly=0xzz',
        'width=8 poly=0x07 init',
        'width=0 poly=0x01',
        'width=65 poly=0x01',
        'width=82 poly=0x0308c0111011401440411',
        'width=8 poly=0x107',
        'width=8 poly=0x07 init=0x100',
        'width=8 poly=0x07 xorout=-1',
    ])
    def test_invalid(self, line):
        with pytest.raises(CRCParamsError):
            parse_crc_params(line)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_crc_params('width=8')


class TestParseCatalogue:

    TEXT = '''
    # comment
    width=8 poly=0x07 check=0xf4 name="CRC-8/SMBUS"

    width=16 poly=0x1021 name="CRC-16/XMODEM" alias="XMODEM,ZMODEM"
    '''

    def test_skips_comments_and_blank_lines(self):
        entries = parse_crc_catalogue(self.TEXT)
        assert [e.name for e in entries] == ['CRC-8/SMBUS', 'CRC-16/XMODEM']

    def test_index(self):
        index = catalogue_index(parse_crc_catalogue(self.TEXT))
        assert set(index) == {'CRC-8/SMBUS', 'CRC-16/XMODEM', 'XMODEM', 'ZMODEM'}
        assert index['ZMODEM'] == CRCParams(16, 0x1021)

    def test_load_catalogue(self, tmp_path):
        path = tmp_path / 'crcs.txt'
        path.write_text(self.TEXT, encoding='utf-8')
        assert load_catalogue(path) == parse_crc_catalogue(self.TEXT)


class TestBuiltinCatalogue:

    def test_widths(self):
        assert all(1 <= e.params.width <= 64 for e in CRC_CATALOGUE)
        assert len(CRC_CATALOGUE) > 100

    def test_unique_names(self):
        names = [e.name for e in CRC_CATALOGUE]
        assert len(names) == len(set(names))

    def test_index_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOGUE_PARAMS['FOO'] = CRCParams(8, 7)

    def test_aliases_indexed(self):
        assert CATALOGUE_PARAMS['CRC-32'] == CATALOGUE_PARAMS['CRC-32/ISO-HDLC']
        assert CATALOGUE_PARAMS['PKZIP'] == CATALOGUE_PARAMS['CRC-32/ISO-HDLC']
        assert CATALOGUE_PARAMS['CRC-64/GO-ECMA'] == CATALOGUE_PARAMS['CRC-64/XZ']

    @pytest.mark.parametrize('entry', CRC_CATALOGUE, ids=lambda e: e.name)
    def test_check(self, entry):
        """ The CRC of "123456789" must match the check value of the
        catalogue with every calculation method. """
        assert entry.check is not None
        assert calculate_crc(entry.params, b'123456789') == entry.check
        assert get_table(entry.params).calculate_crc(b'123456789') == entry.check
        h = CRCHash(get_table(entry.params))
        for chunk in (b'', b'1', b'234', b'', b'56', b'789', b''):
            h.update(chunk)
        assert h.crc() == entry.check
