# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor


class CRCError(Exception):
    pass


class UnknownCRCError(CRCError, LookupError):
    """ No CRC algorithm is registered with the given name or parameters. """


class CRCParamsError(CRCError, ValueError):
    """ Malformed CRC parameter line. """


class CRCInputError(CRCError, ValueError):
    """ The input stream can't be turned into bytes. """
