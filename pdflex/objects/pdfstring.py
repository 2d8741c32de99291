# A part of pdflex
# MIT license -- See LICENSE.txt for details

"""

================================
PdfString encoding and decoding
================================

PDF strings carry arbitrary bytes.  The file syntax has two ways
to delimit them, and the tokenizer undoes both before handing a
PdfString to anyone:

Literal strings
---------------

A literal string is delimited by ASCII parentheses.  Balanced
parentheses may appear unescaped inside; a backslash introduces an
escape:

  - "nrtbf" map to line feed, carriage return, tab, backspace and
    form feed.
  - "(", ")" and "\\" map to themselves.
  - One to three octal digits give the value of one byte.
  - A backslash followed by an end of line (CR, LF or CR LF) is a
    continuation and contributes nothing.

Any other escaped character is rejected.  Some readers pass such
characters through unchanged; this tokenizer treats them as
malformed input.

Hexadecimal strings
-------------------

A hexadecimal string is delimited by "<" and ">" and stores each
byte as two hexadecimal digits, with whitespace allowed anywhere,
including between the two digits of a single byte.

PdfString in pdflex
===================

A PdfString is simply the decoded bytes.  The encode() method goes the
other way, for diagnostics and round-trip checks, choosing whichever
delimiting form is shorter unless told otherwise.
"""

import re
import binascii


class PdfString(bytes):
    ''' A PdfString is a decoded PDF string:  raw bytes, with
        no delimiters and no escapes.
    '''

    bytes_bom = b'\xfe\xff'

    escape_splitter = re.compile(br'(\(|\\|\))').split

    def to_bytes(self):
        return bytes(self)

    def to_unicode(self):
        """ Decode to text.  Strings starting with the UTF-16-BE
            byte order marker are UTF-16; everything else is
            treated as Latin-1, which agrees with PDFDocEncoding
            for the printable ASCII range.
        """
        if self[:2] == self.bytes_bom:
            return self[2:].decode('utf-16-be')
        return self.decode('latin-1')

    def encode(self, bytes_encoding='auto'):
        """ Return the PDF file representation of the string.

            With 'auto', a literal string is produced unless
            escaping would make it at least twice as long as the
            source, in which case hexadecimal is used.  Either
            form can be forced with 'literal' or 'hex'.
        """
        force_hex = bytes_encoding == 'hex'
        if not force_hex:
            if bytes_encoding not in ('literal', 'auto'):
                raise ValueError('Invalid bytes_encoding value: %s'
                                 % bytes_encoding)
            splitlist = self.escape_splitter(self)
            if bytes_encoding == 'auto' and len(splitlist) // 2 >= len(self):
                force_hex = True

        if force_hex:
            # The format does not mandate uppercase,
            # but it seems to be the convention.
            return b'<' + binascii.hexlify(self).upper() + b'>'

        splitlist[1::2] = [(b'\\' + x) for x in splitlist[1::2]]
        return b'(' + b''.join(splitlist) + b')'

    def __repr__(self):
        return 'PdfString(%s)' % bytes.__repr__(self)
