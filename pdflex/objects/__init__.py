# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
Objects that can occur in PDF files.  Booleans, integers, reals
and null are plain Python bool, int, float and None; everything
else has its own type here.  Tokens are a subset of the same
types, plus PdfKeyword and the EOF marker.
'''
from .pdfname import PdfName
from .pdfdict import PdfDict
from .pdfarray import PdfArray
from .pdfobject import PdfKeyword, EOF, is_keyword
from .pdfstring import PdfString
from .pdfindirect import PdfObjRef, PdfObjDef, NULL_REF
from .pdfstream import PdfStream

__all__ = """PdfName PdfDict PdfArray PdfKeyword EOF is_keyword
             PdfString PdfObjRef PdfObjDef NULL_REF PdfStream""".split()
