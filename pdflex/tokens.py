# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
A tokenizer for PDF streams.

In general, documentation used was "PDF reference",
sixth edition, for PDF version 1.7, dated November 2006.

Tokens are fully decoded as they are read:  escapes in strings
and names are processed, numbers are converted.  The token types
are bool, int, float, PdfString, PdfName and PdfKeyword, plus the
EOF marker when the buffer tolerates running out of input.
'''

import re
import itertools

from .buffer import PdfBuffer
from .objects import PdfString, PdfName, PdfKeyword, EOF


# Table 3.1, page 50 of reference, defines whitespace
whitespace = frozenset(b'\x00 \t\f\r\n')

# Text on page 50 defines delimiter characters
delimiters = frozenset(b'()<>{}[]/%')

# Keywords that are really structural delimiters
singles = dict((c, PdfKeyword(chr(c))) for c in b'[]{}')

hexdigits = dict((c, int(chr(c), 16)) for c in b'0123456789abcdefABCDEF')

escapes = {
    ord('n'): b'\n',
    ord('r'): b'\r',
    ord('b'): b'\b',
    ord('t'): b'\t',
    ord('f'): b'\f',
    ord('('): b'(',
    ord(')'): b')',
    ord('\\'): b'\\',
}

octaldigits = frozenset(b'01234567')

# No exponents:  PDF numbers are plain decimal.
is_integer = re.compile(r'[+-]?[0-9]+').fullmatch
is_real = re.compile(r'[+-]?[0-9]*\.[0-9]*').fullmatch

MIN_INT = -(1 << 63)
MAX_INT = (1 << 63) - 1

CR, LF = b'\r\n'


class PdfTokens(PdfBuffer):

    def read_token(self):
        ''' Return the next token.  Tokens that were read and then
            unread come back first, most recent first.
        '''
        if self.unread:
            return self.unread.pop()

        # Find first non-space, non-comment byte.
        read_byte = self.read_byte
        c = read_byte()
        while 1:
            if c in whitespace:
                if self.eof:
                    return EOF
                c = read_byte()
            elif c == 0x25:         # %
                while c != CR and c != LF:
                    c = read_byte()
            else:
                break

        if c == 0x3C:               # <
            if read_byte() == 0x3C:
                return PdfKeyword('<<')
            self.unread_byte()
            return self.read_hex_string()
        if c == 0x28:               # (
            return self.read_literal_string()
        if c in singles:
            return singles[c]
        if c == 0x2F:               # /
            return self.read_name()
        if c == 0x3E:               # >
            if read_byte() == 0x3E:
                return PdfKeyword('>>')
            self.unread_byte()
        if c in delimiters:
            self.exception('unexpected delimiter %r', chr(c))
        self.unread_byte()
        return self.read_keyword()

    def read_hex_string(self):
        ''' Whitespace is skipped between pairs of digits, and also
            between the two digits of one pair.  Most readers only
            allow the former; this one has always accepted both.
        '''
        read_byte = self.read_byte
        result = bytearray()
        while 1:
            c = read_byte()
            while c in whitespace and not self.eof:
                c = read_byte()
            if c == 0x3E:           # >
                break
            c2 = read_byte()
            while c2 in whitespace and not self.eof:
                c2 = read_byte()
            if self.eof:
                self.exception('unterminated hex string')
            if c not in hexdigits or c2 not in hexdigits:
                self.exception('malformed hex string %r %r',
                               chr(c), chr(c2))
            result.append(hexdigits[c] << 4 | hexdigits[c2])
        return PdfString(result)

    def read_literal_string(self):
        read_byte = self.read_byte
        unread_byte = self.unread_byte
        result = bytearray()
        depth = 1
        while 1:
            c = read_byte()
            if self.eof:
                self.warning('Unterminated literal string')
                break
            if c == 0x28:           # (
                depth += 1
            elif c == 0x29:         # )
                depth -= 1
                if not depth:
                    break
            elif c == 0x5C:         # backslash
                c = read_byte()
                escaped = escapes.get(c)
                if escaped is not None:
                    result += escaped
                elif c == CR:
                    if read_byte() != LF:
                        unread_byte()
                elif c == LF:
                    pass
                elif c in octaldigits:
                    x = c - 0x30
                    for i in range(2):
                        c = read_byte()
                        if c not in octaldigits:
                            unread_byte()
                            break
                        x = x * 8 + c - 0x30
                    if x > 255:
                        self.exception('invalid octal escape \\%03o', x)
                    result.append(x)
                else:
                    self.exception('invalid escape sequence \\%s', chr(c))
                continue
            result.append(c)
        return PdfString(result)

    def read_name(self):
        read_byte = self.read_byte
        result = bytearray()
        while 1:
            c = read_byte()
            if c in delimiters or c in whitespace:
                self.unread_byte()
                break
            if c == 0x23:           # #
                c1 = read_byte()
                c2 = read_byte()
                if c1 not in hexdigits or c2 not in hexdigits:
                    self.exception('malformed name')
                c = hexdigits[c1] << 4 | hexdigits[c2]
            result.append(c)
        return PdfName.from_bytes(bytes(result))

    def read_keyword(self):
        read_byte = self.read_byte
        result = bytearray()
        while 1:
            c = read_byte()
            if c in delimiters or c in whitespace:
                self.unread_byte()
                break
            result.append(c)
        text = result.decode('latin-1')
        if text == 'true':
            return True
        if text == 'false':
            return False
        if is_integer(text):
            value = int(text)
            if not MIN_INT <= value <= MAX_INT:
                self.exception('invalid integer %s', text)
            return value
        if is_real(text):
            try:
                return float(text)
            except ValueError:
                self.exception('invalid real %s', text)
        return PdfKeyword(text)

    def __iter__(self):
        ''' Generate tokens up to the end of input.  Only useful
            with allow_eof set.
        '''
        while 1:
            token = self.read_token()
            if token is EOF:
                return
            yield token

    def multiple(self, count, islice=itertools.islice, list=list):
        ''' Retrieve multiple tokens
        '''
        return list(islice(self, count))

    def next_default(self, default='nope'):
        for result in self:
            return result
        return default
