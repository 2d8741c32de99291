# A part of pdflex
# MIT license -- See LICENSE.txt for details

import collections


class PdfObjRef(collections.namedtuple('PdfObjRef', 'id gen')):
    ''' An indirect reference:  the (object number, generation number)
        tuple written "N G R" in the file.  It is never resolved or
        checked against a cross-reference table here.
    '''
    __slots__ = ()

    def __str__(self):
        return '%d %d R' % self


class PdfObjDef(collections.namedtuple('PdfObjDef', 'ptr obj')):
    ''' An indirect object definition, "N G obj ... endobj":  the
        PdfObjRef naming the object, and the object found there.
    '''
    __slots__ = ()


NULL_REF = PdfObjRef(0, 0)
