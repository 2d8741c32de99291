# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
Buffered, forward-seekable byte input for the PDF tokenizer.

The source only needs a read() method, so this works on an open
file, an io.BytesIO, or a view of a section of some larger file,
without ever holding more than one block in memory.
'''

from .errors import log, PdfParseError
from .objects import NULL_REF


class PdfBuffer(object):
    ''' Holds one block of input bytes, the absolute offset of
        that block, a one-byte pushback, a stack of pushed-back
        tokens, and the per-parse settings the tokenizer and
        parser consult.

        Settings (plain attributes, each independently settable):

            allow_eof    -- running off the end of the source yields
                            newlines and the EOF token instead of an
                            error
            allow_objptr -- look ahead for "N G R" and "N G obj"
                            after an integer
            allow_stream -- look for "stream" after a dictionary
            key          -- decryption key for strings, or None
            use_aes      -- key is for AES rather than RC4
            objptr       -- PdfObjRef of the object being parsed;
                            strings are decrypted with it
    '''

    eol = b'\n'[0]

    def __init__(self, source, offset=0, bufsize=4096, allow_eof=False,
                 verbose=True):
        self.source = source
        self.bufsize = bufsize
        self.buf = b''
        self.pos = 0
        self.offset = offset          # offset at end of buf
        self.origin = self._origin(source, offset)
        self.unread = []
        self.eof = False
        self.allow_eof = allow_eof
        self.allow_objptr = True
        self.allow_stream = True
        self.key = None
        self.use_aes = False
        self.objptr = NULL_REF
        self.msgs_dumped = None if verbose else set()

    @staticmethod
    def _origin(source, offset):
        ''' Absolute offset of position 0 of a seekable source,
            or None if the source cannot be repositioned.
        '''
        try:
            if source.seekable():
                return offset - source.tell()
        except (AttributeError, OSError):
            pass
        return None

    def reload(self):
        ''' Replace the current block with the next one.
            Returns False at a tolerated end of input.
        '''
        n = self.bufsize - self.offset % self.bufsize
        try:
            data = self.source.read(n)
        except OSError as err:
            self.buf = b''
            self.pos = 0
            raise PdfParseError('malformed PDF: reading at offset %d: %s'
                                % (self.offset, err)) from err
        self.buf = data
        self.pos = 0
        if not data:
            if self.allow_eof:
                self.eof = True
                return False
            raise PdfParseError('malformed PDF: reading at offset %d: '
                                'unexpected EOF' % self.offset)
        self.offset += len(data)
        return True

    def read_byte(self):
        if self.pos >= len(self.buf):
            if not self.reload():
                return self.eol
        c = self.buf[self.pos]
        self.pos += 1
        return c

    def unread_byte(self):
        if self.pos > 0:
            self.pos -= 1

    def unread_token(self, token):
        self.unread.append(token)

    def pop_token(self):
        ''' Return the most recently unread token, or
            None if there is nothing pushed back.
        '''
        unread = self.unread
        if unread:
            return unread.pop()

    def seek(self, offset):
        ''' Jump to an absolute file offset, discarding anything
            buffered or pushed back.
        '''
        log.debug('seek to offset %d', offset)
        self.offset = offset
        self.buf = b''
        self.pos = 0
        self.unread = []
        self.eof = False
        if self.origin is not None:
            self.source.seek(offset - self.origin)

    def seek_forward(self, offset):
        ''' Skip ahead to an absolute offset by reading and
            discarding whole blocks.
        '''
        if offset < self.offset - len(self.buf):
            raise PdfParseError('cannot seek backward from offset %d to %d'
                                % (self.read_offset(), offset))
        while self.offset < offset:
            if not self.reload():
                return
        self.pos = len(self.buf) - (self.offset - offset)

    def read_offset(self):
        return self.offset - len(self.buf) + self.pos

    def msg(self, msg, *arg):
        dumped = self.msgs_dumped
        if dumped is not None:
            if msg in dumped:
                return
            dumped.add(msg)
        if arg:
            msg %= arg
        return '%s (offset=%d)' % (msg, self.read_offset())

    def warning(self, *arg):
        s = self.msg(*arg)
        if s:
            log.warning(s)

    def error(self, *arg):
        s = self.msg(*arg)
        if s:
            log.error(s)

    def exception(self, *arg):
        msg, arg = arg[0], arg[1:]
        if arg:
            msg %= arg
        raise PdfParseError('%s (offset=%d)' % (msg, self.read_offset()))
