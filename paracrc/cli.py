# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Command line CRC calculator.

    $ echo -n 123456789 | python3 -m paracrc -c CRC-32
    CRC-32 width=32 poly=0x04c11db7 init=0xffffffff refin=true refout=true xorout=0xffffffff
    number of bytes processed: 9
    crc: 0xcbf43926

    $ python3 -m paracrc -l   # lists and tests the builtin CRC algorithms
"""
import argparse
import re
import sys

from .catalogue import CRC_CATALOGUE, catalogue_index, load_catalogue, parse_crc_params
from .codec import crc_to_bytes
from .core import calculate_crc
from .crchash import CRCHash
from .errors import CRCError, CRCInputError, CRCParamsError
from .registry import get_parameters
from .table import get_table

MAX_CHUNK_SIZE = 128 * 1024


def _test_crc(entry) -> bool:
    p = entry.params
    w = (p.width+3) // 4
    print('{:25s} {}'.format(entry.name, p))

    crc_1 = calculate_crc(p, b'123456789')
    crc_2 = get_table(p).calculate_crc(b'123456789')

    # Calculating the same CRC by feeding in the data in smaller chunks
    # including zero-sized chunks.
    h = CRCHash(get_table(p))
    for chunk in (b'', b'1', b'234', b'', b'56', b'789', b''):
        h.update(chunk)
    crc_3 = h.crc()

    print('{:25s} expected:    check={:0{w}x}\n'
          '{:25s} test_output: check={:0{w}x}'.format
          ('', entry.check, '', crc_1, w=w))
    if entry.aliases:
        print('{:25s} aliases:     {}'.format('', ', '.join(entry.aliases)))

    if not crc_1 == crc_2 == crc_3:
        print('Table driven or chunked CRC calculation failed.')
        return False
    if crc_1 != entry.check:
        print('CRC doesn\'t match the reference "check" value.')
        return False
    return True


def _test_and_list_catalogue_entries(crc_catalogue) -> bool:
    passed, failed = [], []
    for entry in crc_catalogue:
        if entry.check is None:
            continue
        if _test_crc(entry):
            passed.append(entry.name)
        else:
            failed.append(entry.name)
    if failed:
        print('Failed CRCs: ' + ', '.join(failed))
    print('Number of failed CRC algorithms: %s' % len(failed))
    print('Number of CRC algorithms that passed the test: %s' % len(passed))
    return not failed


def _input_iterator_hex(infile, max_chunk_size=16*1024):
    p_space = re.compile(rb'\s+')
    p_hex = re.compile(rb'^[0-9a-fA-F]*$')

    # An odd number of hex digits can arrive in a chunk, the last digit is
    # kept until the next one completes the byte.
    leftover = b''
    while 1:
        chunk = infile.read(max_chunk_size)
        if not chunk:
            break
        chunk = p_space.sub(b'', chunk)
        if not p_hex.match(chunk):
            raise CRCInputError('invalid input character - '
                                'allowed characters: hex digits, whitespace')
        chunk = leftover + chunk
        leftover = b''
        if len(chunk) & 1:
            leftover = chunk[-1:]
            chunk = chunk[:-1]
        if chunk:
            yield bytes.fromhex(chunk.decode('ascii'))

    if leftover:
        raise CRCInputError('unconsumed nibble at the end of input stream: '
                            + leftover.decode('ascii'))


def _input_iterator(infile, input_format):
    """ This generator yields the input in chunks of bytes. """
    if input_format == 'hex':
        yield from _input_iterator_hex(infile)
        return

    assert input_format == 'binary'
    while 1:
        chunk = infile.read(MAX_CHUNK_SIZE)
        if not chunk:
            break
        yield chunk


def _resolve_crc(name_or_params: str, extra_catalogue=None):
    """ Returns a (name, params) tuple. """
    name_or_params = name_or_params.strip()
    custom_prefix = 'custom:'
    if name_or_params.lower().startswith(custom_prefix):
        try:
            entry = parse_crc_params(name_or_params[len(custom_prefix):].strip())
        except CRCParamsError as ex:
            raise CRCParamsError('invalid "CUSTOM:" CRC parameters: %s' % ex) from ex
        return 'CUSTOM', entry.params
    if extra_catalogue:
        params = extra_catalogue.get(name_or_params.upper())
        if params is not None:
            return name_or_params, params
    return name_or_params, get_parameters(name_or_params)


def _calc_crc(args):
    extra = None
    if args.catalogue:
        extra = catalogue_index(load_catalogue(args.catalogue))
    name, p = _resolve_crc(args.crc, extra)
    w = (p.width+3) // 4

    if not args.quiet:
        print('{} {}'.format(name, p))

    if args.format == '0xhex':
        fmt = lambda v: '0x{:0{w}x}'.format(v, w=w)
    elif args.format == 'hex':
        fmt = lambda v: '{:0{w}x}'.format(v, w=w)
    elif args.format == 'bytes':
        fmt = lambda v: crc_to_bytes(p, v).hex()
    else:
        fmt = str

    h = CRCHash(get_table(p), interim=args.continue_from)
    bytes_processed = 0
    for chunk in _input_iterator(args.infile, args.input_format):
        bytes_processed += h.write(chunk)

    if args.interim_remainder:
        v = h.interim
        label = 'interim remainder: '
    else:
        v = h.crc()
        label = 'crc: '

    if not args.quiet:
        print('number of bytes processed: %s' % bytes_processed)
    print(fmt(v) if args.quiet else label + fmt(v))

    if args.verify is not None:
        try:
            expected = bytes.fromhex(args.verify)
        except ValueError:
            raise CRCInputError('invalid --verify checksum: %r' % args.verify) from None
        ok = expected == crc_to_bytes(p, h.crc())
        print('OK' if ok else 'FAILED')
        return ok
    return True


def _parse_args(argv):
    p = argparse.ArgumentParser(prog='paracrc', description='Parametric CRC calculator.')
    auto_int = lambda s: int(s, 0)
    p.add_argument('-l', '--list', action='store_true', help=
                   'list and test all builtin CRC algorithms')
    p.add_argument('-c', '--crc', help='the name of the CRC algorithm or'
                   ' "CUSTOM: width=X poly=Y ..."')
    p.add_argument('--catalogue', help='file with additional CRC algorithms '
                   'in the format of the CRC RevEng catalogue')
    p.add_argument('-r', '--interim-remainder', action='store_true', help=
                   'output an interim remainder instead of the final CRC')
    p.add_argument('-k', '--continue-from', type=auto_int, help='continue CRC '
                   'calculation from the specified interim remainder')
    p.add_argument('-i', '--input-format', choices=['binary', 'hex'],
                   default='binary', help='input data format')
    p.add_argument('-f', '--format', choices=['0xhex', 'hex', 'decimal', 'bytes'],
                   default='0xhex', help='output format of the crc or interim '
                   'remainder, "bytes" is the little-endian byte sequence of the crc')
    p.add_argument('--verify', metavar='HEX', help='compare the crc with the '
                   'given little-endian byte sequence')
    p.add_argument('-q', '--quiet', action='store_true', help=
                   'output only the result of the calculation')
    p.add_argument('infile', nargs='?', type=argparse.FileType('rb'), help=
                   'name of the input file, default: stdin', default=sys.stdin)
    return p, p.parse_args(argv)


def main(argv=None) -> int:
    p, args = _parse_args(argv)

    if args.interim_remainder and (args.format == 'bytes' or args.verify):
        print('--interim-remainder can\'t be used with --format bytes or --verify',
              file=sys.stderr)
        if args.infile is not sys.stdin:
            args.infile.close()
        return 1

    if args.infile is sys.stdin:
        args.infile = sys.stdin.buffer  # we want to read binary data not strings

    if args.list:
        return 0 if _test_and_list_catalogue_entries(CRC_CATALOGUE) else 1

    if args.crc:
        try:
            return 0 if _calc_crc(args) else 1
        except (CRCError, OSError) as ex:
            print('error: %s' % ex, file=sys.stderr)
            return 1
        finally:
            args.infile.close()

    p.print_help()
    return 2
