# A part of pdflex
# MIT license -- See LICENSE.txt for details


class PdfArray(list):
    ''' A PdfArray maps the PDF file array object into a Python list.
    '''

    def __repr__(self):
        return 'PdfArray(%s)' % list.__repr__(self)
