# A part of pdflex
# MIT license -- See LICENSE.txt for details

from .pdfname import PdfName
from ..errors import PdfParseError


class PdfDict(dict):
    ''' PdfDict objects are subclassed dictionaries
        with the following features:

        - Every key in the dictionary is a PdfName.  Setting
          any other kind of key raises PdfParseError.

        - Keys that conform to Python naming conventions can
          also be read as attributes of the dictionary.  E.g.
          mydict.Type is the same thing as mydict.get('Type').
          A missing key reads as None, which is also how PDF
          treats a missing dictionary entry.

        Values are stored exactly as parsed:  indirect
        references stay PdfObjRef tuples, because this package
        never resolves them.
    '''

    def __init__(self, *args, **kw):
        dict.__init__(self)
        if args:
            if len(args) == 1:
                args = args[0]
            self.update(args)
        for key, value in kw.items():
            self[PdfName(key)] = value

    def __setitem__(self, name, value, setter=dict.__setitem__,
                    PdfName=PdfName, isinstance=isinstance):
        if not isinstance(name, PdfName):
            raise PdfParseError('Dict key %s is not a PdfName' % repr(name))
        setter(self, name, value)

    def update(self, *args, **kw):
        for key, value in dict(*args, **kw).items():
            self[key] = value

    def setdefault(self, key, default=None):
        if key not in self:
            self[key] = default
        return dict.__getitem__(self, key)

    def __getattr__(self, name, PdfName=PdfName):
        ''' If the attribute doesn't exist on the dictionary object,
            look it up as a name in the actual dictionary itself.
        '''
        if name.startswith('__'):
            raise AttributeError(name)
        return self.get(PdfName(name))

    def copy(self):
        return type(self)(self)

    def __repr__(self):
        return 'PdfDict(%s)' % dict.__repr__(self)
