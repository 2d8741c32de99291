# A part of pdflex
# MIT license -- See LICENSE.txt for details

"""
Render parsed objects back into PDF syntax, for log messages,
debugging and round-trip checks.  This is not a file writer:
streams come out as their header only, since the payload was
never read.
"""

import math
from decimal import Decimal

from .errors import PdfOutputError
from .objects import (PdfDict, PdfArray, PdfName, PdfString, PdfKeyword,
                      PdfObjRef, PdfObjDef, PdfStream)


def format_real(obj):
    ''' Shortest decimal that reads back as the same float,
        without the exponent notation PDF does not allow.
    '''
    if not math.isfinite(obj):
        raise PdfOutputError('Cannot represent real %r in PDF' % obj)
    result = format(Decimal(repr(obj)), 'f')
    if '.' not in result:
        result += '.0'
    return result.encode('ascii')


def format_dict(obj):
    pairs = sorted(obj.items())
    parts = [b'<<']
    for key, value in pairs:
        parts.append(key.encoded.encode('latin-1'))
        parts.append(objfmt(value))
    parts.append(b'>>')
    return b' '.join(parts)


def objfmt(obj, isinstance=isinstance):
    ''' Format one object.  Returns bytes, because
        PDF strings may hold anything.
    '''
    if obj is None:
        return b'null'
    if isinstance(obj, bool):
        return b'true' if obj else b'false'
    if isinstance(obj, int):
        return b'%d' % obj
    if isinstance(obj, float):
        return format_real(obj)
    if isinstance(obj, PdfString):
        return obj.encode()
    if isinstance(obj, PdfName):
        return obj.encoded.encode('latin-1')
    if isinstance(obj, PdfKeyword):
        return obj.encode('latin-1')
    if isinstance(obj, PdfDict):
        return format_dict(obj)
    if isinstance(obj, PdfArray):
        return b'[' + b' '.join(objfmt(x) for x in obj) + b']'
    if isinstance(obj, PdfObjRef):
        return b'%d %d R' % obj
    if isinstance(obj, PdfObjDef):
        return b'%d %d obj\n%s\nendobj' % (obj.ptr.id, obj.ptr.gen,
                                          objfmt(obj.obj))
    if isinstance(obj, PdfStream):
        return format_dict(obj.hdr) + b'\nstream\n'
    raise PdfOutputError('Cannot format object of type %s'
                         % type(obj).__name__)
