# A part of pdflex
# MIT license -- See LICENSE.txt for details

import collections


class PdfStream(collections.namedtuple('PdfStream', 'hdr ptr offset')):
    ''' A stream object, found as a dictionary followed by the
        "stream" keyword.  The payload is not read.

        hdr    -- the PdfDict header (/Length, /Filter, ...)
        ptr    -- the PdfObjRef of the enclosing object definition,
                  or PdfObjRef(0, 0) outside of one
        offset -- absolute source offset of the first payload byte,
                  just past the end of line after "stream"

        Decoding is up to the caller, who knows how to get from
        hdr.Length (which may itself be indirect) to a byte count.
    '''
    __slots__ = ()

    def __getattr__(self, name):
        ''' Header entries are visible as attributes, as they are
            on the PdfDict itself.
        '''
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self.hdr, name)
