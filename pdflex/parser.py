# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
The PdfParser class builds PDF objects out of the token stream.

An integer, an indirect reference ("5 0 R") and an indirect object
definition ("5 0 obj ... endobj") all start the same way, so after
an integer the parser reads up to two more tokens to decide, and
pushes back whatever it did not use.
'''

from .tokens import PdfTokens
from .objects import (PdfDict, PdfArray, PdfName, PdfString, PdfKeyword,
                      PdfObjRef, PdfObjDef, PdfStream, EOF, is_keyword)
from . import crypt

CR, LF = b'\r\n'


def is_uint(token, limit):
    ''' True for an int (but not a bool) in range(limit).
    '''
    return type(token) is int and 0 <= token < limit


class PdfParser(PdfTokens):
    ''' Reads PDF objects from a byte source.

        decrypt is called as decrypt(key, use_aes, objptr, data)
        for every string read while a key is set and an object
        definition is being parsed.  It defaults to
        crypt.decrypt_string.
    '''

    def __init__(self, source, offset=0, decrypt=None, **kw):
        PdfTokens.__init__(self, source, offset, **kw)
        self.decrypt = decrypt or crypt.decrypt_string

    def read_object(self):
        tok = self.read_token()
        if isinstance(tok, PdfKeyword):
            if tok == 'null':
                return None
            if tok == '<<':
                return self.read_dict()
            if tok == '[':
                return self.read_array()
            self.exception('unexpected keyword %r parsing object', str(tok))

        if (isinstance(tok, PdfString) and self.key is not None and
                self.objptr.id != 0):
            tok = PdfString(self.decrypt(self.key, self.use_aes,
                                         self.objptr, tok))

        if not self.allow_objptr or not is_uint(tok, 1 << 32):
            return tok

        tok2 = self.read_token()
        if is_uint(tok2, 1 << 16):
            tok3 = self.read_token()
            if is_keyword(tok3, 'R'):
                return PdfObjRef(tok, tok2)
            if is_keyword(tok3, 'obj'):
                return self.read_objdef(PdfObjRef(tok, tok2))
            self.unread_token(tok3)
        self.unread_token(tok2)
        return tok

    def read_objdef(self, ptr):
        ''' Found "N G obj".  Parse the object inside, with ptr as
            the current object for string decryption.
        '''
        old = self.objptr
        self.objptr = ptr
        try:
            obj = self.read_object()
            # A stream ends with endstream, which is past the
            # unread payload; the caller deals with it.
            if not isinstance(obj, PdfStream):
                tok = self.read_token()
                if not is_keyword(tok, 'endobj'):
                    self.unread_token(tok)
                    self.exception('missing endobj after indirect '
                                   'object definition %d %d', *ptr)
        finally:
            self.objptr = old
        return PdfObjDef(ptr, obj)

    def read_array(self):
        ''' Found a [ token.  Parse the objects after that.
        '''
        result = PdfArray()
        append = result.append
        while 1:
            tok = self.read_token()
            if tok is EOF or is_keyword(tok, ']'):
                break
            self.unread_token(tok)
            append(self.read_object())
        return result

    def read_dict(self):
        ''' Found a << token.  Parse the key/value pairs after that,
            and check for a following stream.
        '''
        result = PdfDict()
        while 1:
            tok = self.read_token()
            if tok is EOF or is_keyword(tok, '>>'):
                break
            if not isinstance(tok, PdfName):
                self.exception('unexpected non-name key %r parsing '
                               'dictionary', tok)
            value = self.read_object()
            if value is EOF:
                self.warning('dictionary key /%s has no value', tok)
                break
            result[tok] = value

        if not self.allow_stream:
            return result

        tok = self.read_token()
        if not is_keyword(tok, 'stream'):
            self.unread_token(tok)
            return result

        c = self.read_byte()
        if c == CR:
            if self.read_byte() != LF:
                self.unread_byte()
                self.warning(r'stream keyword terminated by \r without \n')
        elif c != LF:
            self.exception('stream keyword not followed by newline')

        return PdfStream(result, self.objptr, self.read_offset())

    def read_object_at(self, offset):
        ''' Seek to an absolute offset (typically from a
            cross-reference table) and read one object.
        '''
        self.seek(offset)
        return self.read_object()

    def iter_objects(self):
        ''' Generate objects until the end of input.  Only useful
            with allow_eof set.
        '''
        while 1:
            obj = self.read_object()
            if obj is EOF:
                return
            yield obj
