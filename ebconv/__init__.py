"""
ebconv Python Library
~~~~~~~~~~~~~~~~~~~~~

    Mainframe text files are stored in EBCDIC, usually as fixed length
    records with no line terminators. This library converts such files to
    a modern encoding (and back), cleaning up the characters that don't
    survive the trip: EBCDIC control characters become spaces, the
    decoded character U+0015 becomes a newline and, for fixed length records,
    a newline can be inserted every LRECL characters.

    This module contains helper functions to convert bytes, single files
    and whole folders. The ``FileConverter`` class converts one file at a
    time, ``TreeConverter`` converts a folder recursively.
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

__version__ = '0.1.0'
__license__ = "GPL"

from .codec import EBCDIC_DEFAULT, codec_names, decode, default_encoding, encode
from .errors import (ConversionError, ConverterError, DecodeError, EncodeError,
                     EncodingError)
from .normalize import NON_PRINTABLE, is_printable, normalize
from .converter import FileConverter
from .batch import FileResult, TreeConverter, list_files


def convert_ebcdic(ebcdic_data, lrecl=None, encoding=EBCDIC_DEFAULT):
    '''Converts EBCDIC bytes to text. Returns string.

    Args:
        ebcdic_data (bytes): the data to be converted
        lrecl (int): Record length. A newline is inserted every lrecl
            characters. None (the default) uses NEL as the line separator.
        encoding (str): EBCDIC codepage. Defaults to cp1047
    '''
    return normalize(decode(ebcdic_data, encoding), lrecl)


def convert_file(source, destination, source_encoding=EBCDIC_DEFAULT,
                 target_encoding=None, fold_width=None):
    '''Converts one file. Returns the number of bytes written.

    Args:
        source (str): path of the file to convert
        destination (str): path of the converted file
        source_encoding (str): encoding of source. Defaults to cp1047
        target_encoding (str): encoding of destination. Defaults to the
            host default encoding
        fold_width (int): insert a newline every fold_width characters
    '''
    conv = FileConverter(source_encoding, target_encoding, fold_width)
    return conv.convert(source, destination)


def convert_tree(source, destination, source_encoding=EBCDIC_DEFAULT,
                 target_encoding=None, fold_width=None, quiet=True):
    '''Converts all files in source to destination. Returns True if every
    file was converted.'''
    tree = TreeConverter(
        source,
        destination,
        source_encoding=source_encoding,
        target_encoding=target_encoding,
        fold_width=fold_width,
        quiet=quiet
    )
    return tree.convert_all()
