# A part of pdflex
# MIT license -- See LICENSE.txt for details

'''
Decryption of PDF strings, one object at a time.

Deriving the document key from the /Encrypt dictionary and the
password is somebody else's job; this module takes that key and
produces the per-object key (Algorithm 1 in the PDF spec) and the
plaintext.
'''

import hashlib
import struct

from Crypto.Cipher import ARC4, AES
from Crypto.Util.Padding import unpad

from .errors import PdfParseError


def object_key(key, objptr, use_aes=False):
    """Create the key for one object (Algorithm 1)."""
    num, gen = objptr
    new_key_size = min(len(key) + 5, 16)
    key_extension = struct.pack('<I', num)[:3]
    key_extension += struct.pack('<H', gen)
    if use_aes:
        key_extension += b'sAlT'
    return hashlib.md5(key + key_extension).digest()[:new_key_size]


def decrypt_aes(key, data):
    """AES-CBC with the IV in front and PKCS#7 padding behind."""
    if len(data) < 2 * AES.block_size or len(data) % AES.block_size:
        raise PdfParseError('encrypted string of length %d is not a whole '
                            'number of AES blocks after the IV'
                            % len(data))
    if len(key) not in AES.key_size:
        raise PdfParseError('AES key of %d bytes is not a valid AES key '
                            'length' % len(key))
    iv = data[:AES.block_size]
    cipher = AES.new(key, AES.MODE_CBC, iv)
    decrypted = cipher.decrypt(data[AES.block_size:])
    try:
        return unpad(decrypted, AES.block_size)
    except ValueError as err:
        raise PdfParseError('bad padding on AES encrypted string: %s'
                            % err) from err


def decrypt_rc4(key, data):
    try:
        cipher = ARC4.new(key)
    except ValueError as err:
        raise PdfParseError('bad RC4 key: %s' % err) from err
    return cipher.decrypt(data)


def decrypt_string(key, use_aes, objptr, data):
    ''' Decrypt one string from the object named by objptr.
    '''
    key = object_key(key, objptr, use_aes)
    if use_aes:
        return decrypt_aes(key, bytes(data))
    return decrypt_rc4(key, bytes(data))
