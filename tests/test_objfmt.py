#! /usr/bin/env python
# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_objfmt
'''

import io
import unittest

from pdflex import (objfmt, PdfParser, PdfDict, PdfArray, PdfName,
                    PdfString, PdfKeyword, PdfObjRef, PdfObjDef, PdfStream,
                    PdfOutputError)
from pdflex.objects import NULL_REF


def reparse(obj):
    p = PdfParser(io.BytesIO(objfmt(obj)), allow_eof=True)
    return p.read_object()


class TestObjFmt(unittest.TestCase):

    def test_scalars(self):
        self.assertEqual(objfmt(None), b'null')
        self.assertEqual(objfmt(True), b'true')
        self.assertEqual(objfmt(False), b'false')
        self.assertEqual(objfmt(-42), b'-42')
        self.assertEqual(objfmt(PdfKeyword('endobj')), b'endobj')

    def test_reals(self):
        self.assertEqual(objfmt(0.5), b'0.5')
        self.assertEqual(objfmt(3.0), b'3.0')
        self.assertEqual(objfmt(1e20), b'100000000000000000000.0')
        self.assertEqual(objfmt(1.5e-7), b'0.00000015')
        self.assertRaises(PdfOutputError, objfmt, float('inf'))
        self.assertRaises(PdfOutputError, objfmt, float('nan'))

    def test_containers(self):
        d = PdfDict(Type=PdfName('Page'), Kids=PdfArray([PdfObjRef(3, 0)]))
        self.assertEqual(objfmt(d), b'<< /Kids [3 0 R] /Type /Page >>')
        self.assertEqual(objfmt(PdfObjDef(PdfObjRef(1, 0), 5)),
                         b'1 0 obj\n5\nendobj')
        self.assertEqual(objfmt(PdfStream(PdfDict(Length=0), NULL_REF, 9)),
                         b'<< /Length 0 >>\nstream\n')

    def test_unknown_type(self):
        self.assertRaises(PdfOutputError, objfmt, object())

    def test_roundtrip(self):
        samples = [
            0, -7, 9223372036854775807, 0.1, -2.5, 1e-10, 123456.789,
            True, False, None,
            PdfName('Type'), PdfName('A B#(x)'), PdfName(u'\x00\xff'),
            PdfName(''),
            PdfString(b''), PdfString(b'plain text'),
            PdfString(b'unbalanced ( paren \\ and )) more'),
            PdfString(bytes(range(256))),
            PdfString(b'\r\n\r'),
            PdfArray([1, PdfArray([]), PdfString(b'x'), PdfObjRef(4, 0)]),
            PdfDict({PdfName('K'): PdfArray([PdfName('V'), 2.25]),
                     PdfName('N'): None}),
            PdfObjRef(4294967295, 65535),
            PdfObjDef(PdfObjRef(6, 0), PdfDict(Count=3)),
        ]
        for obj in samples:
            result = reparse(obj)
            self.assertEqual(result, obj)
            self.assertIs(type(result), type(obj))

    def test_roundtrip_forced_literal(self):
        s = PdfString(bytes(range(256)))
        p = PdfParser(io.BytesIO(s.encode('literal')), allow_eof=True)
        self.assertEqual(p.read_object(), s)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
