# A part of pdflex
# MIT license -- See LICENSE.txt for details

import re


class PdfName(str):
    ''' A PdfName is a PDF name object, stored decoded and
        without its leading slash.  Bytes that came from #<hex><hex>
        escapes are mapped one-for-one onto characters (Latin-1),
        so a name compares equal to the plain text it spells.

        The "encoded" attribute is what would be written to
        a PDF file: the leading slash, plus #<hex><hex> escapes
        for whitespace, delimiters, "#" itself, and anything
        outside the printable ASCII range.
    '''

    delimiters = '()<>{}[]/%'
    forbidden = re.compile('[^!-~]|[%s#]' % re.escape(delimiters))

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw.decode('latin-1'))

    def to_bytes(self):
        return self.encode('latin-1')

    @property
    def encoded(self, forbidden=forbidden):
        return '/' + forbidden.sub(
            lambda m: '#%02X' % ord(m.group()), self)

    def __repr__(self):
        return 'PdfName(%s)' % self.encoded
