#! /usr/bin/env python
# encoding: utf-8
# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_objects
'''


from pdflex import (PdfDict, PdfName, PdfString, PdfKeyword, PdfObjRef,
                    PdfStream, PdfParseError, EOF)
from pdflex.objects import is_keyword, NULL_REF

import unittest


class TestPdfString(unittest.TestCase):

    def test_is_bytes(self):
        s = PdfString(b'abc')
        self.assertEqual(s, b'abc')
        self.assertEqual(s.to_bytes(), b'abc')
        self.assertIs(type(s.to_bytes()), bytes)

    def test_encode_literal(self):
        self.assertEqual(PdfString(b'ABC').encode(), b'(ABC)')
        self.assertEqual(PdfString(b'a(b)c\\').encode(),
                         b'(a\\(b\\)c\\\\)')

    def test_encode_hex_when_shorter(self):
        self.assertEqual(PdfString(b'((((').encode(), b'<28282828>')
        self.assertEqual(PdfString(b'').encode(), b'<>')

    def test_encode_forced(self):
        self.assertEqual(PdfString(b'AB').encode('hex'), b'<4142>')
        self.assertEqual(PdfString(b'((').encode('literal'), b'(\\(\\()')
        self.assertRaises(ValueError, PdfString(b'x').encode, 'base64')

    def test_to_unicode(self):
        self.assertEqual(PdfString(b'hello').to_unicode(), u'hello')
        utf16 = PdfString(b'\xfe\xff' + u'δΩσ'.encode('utf-16-be'))
        self.assertEqual(utf16.to_unicode(), u'δΩσ')


class TestPdfName(unittest.TestCase):

    def test_plain(self):
        name = PdfName('Type')
        self.assertEqual(name, 'Type')
        self.assertEqual(name.encoded, '/Type')

    def test_encoded(self):
        self.assertEqual(PdfName('A B').encoded, '/A#20B')
        self.assertEqual(PdfName('a/b#c(d)').encoded, '/a#2Fb#23c#28d#29')
        self.assertEqual(PdfName(u'Caf\xe9').encoded, '/Caf#E9')
        self.assertEqual(PdfName('').encoded, '/')

    def test_bytes(self):
        name = PdfName.from_bytes(b'\x00\xff')
        self.assertEqual(name.to_bytes(), b'\x00\xff')
        self.assertEqual(name.encoded, '/#00#FF')


class TestKeyword(unittest.TestCase):

    def test_is_keyword(self):
        self.assertTrue(is_keyword(PdfKeyword('R'), 'R'))
        self.assertFalse(is_keyword(PdfName('R'), 'R'))
        self.assertFalse(is_keyword('R', 'R'))
        self.assertFalse(is_keyword(EOF, 'R'))

    def test_eof(self):
        self.assertFalse(EOF)
        self.assertEqual(repr(EOF), 'EOF')


class TestPdfDict(unittest.TestCase):

    def test_attribute_access(self):
        d = PdfDict()
        d[PdfName('Type')] = PdfName('Page')
        self.assertEqual(d.Type, 'Page')
        self.assertIsNone(d.Parent)
        self.assertEqual(d.get('Type'), 'Page')

    def test_keyword_constructor(self):
        d = PdfDict(Type=PdfName('Page'), Count=3)
        self.assertEqual(d, {'Type': 'Page', 'Count': 3})
        for key in d:
            self.assertIsInstance(key, PdfName)
        self.assertIsInstance(d.copy(), PdfDict)
        self.assertEqual(d.copy(), d)

    def test_non_name_key(self):
        d = PdfDict()
        self.assertRaises(PdfParseError, d.__setitem__, 'Type', 1)
        self.assertRaises(PdfParseError, d.update, {'Type': 1})
        self.assertRaises(PdfParseError, PdfDict, {'Type': 1})
        self.assertRaises(PdfParseError, d.setdefault, 'Type', 1)

    def test_references_stay_unresolved(self):
        d = PdfDict({PdfName('Parent'): PdfObjRef(3, 0)})
        self.assertEqual(d.Parent, (3, 0))
        self.assertEqual(str(d.Parent), '3 0 R')


class TestPdfStream(unittest.TestCase):

    def test_fields(self):
        hdr = PdfDict(Length=10)
        s = PdfStream(hdr, NULL_REF, 1234)
        self.assertIs(s.hdr, hdr)
        self.assertEqual(s.offset, 1234)
        self.assertEqual(s.Length, 10)
        self.assertIsNone(s.Filter)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
