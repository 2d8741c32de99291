# A part of pdflex
# MIT license -- See LICENSE.txt for details


class PdfKeyword(str):
    ''' A PdfKeyword is a bare PDF token that is not a number,
        boolean, string or name: operators such as obj, endobj,
        stream, R and null, and the structural delimiters
        << >> [ ] { }.
    '''

    def __repr__(self):
        return 'PdfKeyword(%s)' % str.__repr__(self)


def is_keyword(token, text, PdfKeyword=PdfKeyword):
    ''' PdfName and PdfKeyword are both strings, so a plain
        equality test would confuse /R with R.
    '''
    return isinstance(token, PdfKeyword) and token == text


class _EndOfInput(object):
    ''' The token returned when the tokenizer runs off the
        end of a tolerated-EOF source.
    '''
    __slots__ = ()

    def __repr__(self):
        return 'EOF'

    def __bool__(self):
        return False


EOF = _EndOfInput()
