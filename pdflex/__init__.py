# A part of pdflex
# MIT license -- See LICENSE.txt for details

from .parser import PdfParser
from .tokens import PdfTokens
from .buffer import PdfBuffer
from .objects import (PdfName, PdfDict, PdfArray, PdfKeyword, PdfString,
                      PdfObjRef, PdfObjDef, PdfStream, EOF)
from .objfmt import objfmt
from .errors import PdfError, PdfParseError, PdfOutputError

__version__ = '0.1'

__all__ = """PdfParser PdfTokens PdfBuffer PdfName PdfDict PdfArray
             PdfKeyword PdfString PdfObjRef PdfObjDef PdfStream EOF
             objfmt PdfError PdfParseError PdfOutputError""".split()
