"""
Byte to code point conversion.

Thin wrappers around Python's codec registry. Importing ``ebcdic`` registers
the EBCDIC code pages Python doesn't ship (cp1047, cp1141, ...) so they can
be looked up by name like any other codec.
"""

# Copyright (c) 2021, Philip Young
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
# this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
# this list of conditions and the following disclaimer in the documentation
# and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

import codecs
import functools
import locale

import ebcdic

from .errors import DecodeError, EncodeError, EncodingError

EBCDIC_DEFAULT = 'cp1047'


def lookup(encoding):
    '''Returns the ``codecs.CodecInfo`` for encoding.

    Raises ``EncodingError`` if the name is unknown or names a codec that
    doesn't convert between bytes and text (base64, zlib, rot13, ...).
    '''
    if not isinstance(encoding, str):
        raise EncodingError(encoding)
    return _lookup_text_codec(encoding)


@functools.lru_cache(maxsize=None)
def _lookup_text_codec(encoding):
    try:
        info = codecs.lookup(encoding)
    except LookupError:
        raise EncodingError(encoding) from None
    if not getattr(info, '_is_text_encoding', True):
        raise EncodingError(encoding, 'is not a text encoding')
    return info


def decode(data, encoding):
    '''Decodes bytes to a string. Invalid bytes raise ``DecodeError``, they
    are never dropped or replaced.
    '''
    info = lookup(encoding)
    try:
        text, _ = info.decode(data, 'strict')
    except UnicodeDecodeError as e:
        raise DecodeError(info.name, e.start, e.reason) from e
    return text


def encode(text, encoding):
    '''Encodes a string to bytes. Characters the encoding can't represent
    raise ``EncodeError``.
    '''
    info = lookup(encoding)
    try:
        data, _ = info.encode(text, 'strict')
    except UnicodeEncodeError as e:
        raise EncodeError(info.name, e.start, e.object[e.start]) from e
    return data


def default_encoding():
    '''The host default text encoding.'''
    return locale.getpreferredencoding(False)


def codec_names():
    '''Sorted list of the EBCDIC code pages available for conversion.'''
    return sorted(set(ebcdic.codec_names + ebcdic.ignored_codec_names()))
