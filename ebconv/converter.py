"""
Single file conversion: read, decode, normalize, encode, write.
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

from pathlib import Path

import logging

from . import codec
from .errors import ConversionError, ConverterError
from .normalize import check_fold_width, normalize

logger = logging.getLogger(__name__)


class FileConverter:
    """
    Converts files from one encoding to another.

    Both encodings are resolved when the converter is created, so an unknown
    name fails before any file is touched. A converter holds no state between
    files and can be shared.

    Examples:
        Convert an EBCDIC file to UTF-8, adding a newline every 80 characters::

            >>> from ebconv import FileConverter
            >>> conv = FileConverter('cp1047', 'utf-8', fold_width=80)
            >>> conv.convert("/path/to/FILE.EBC", "/path/to/FILE.txt")

    Args:
        source_encoding (str): encoding of the input files. Defaults to cp1047.
        target_encoding (str): encoding of the output files. Defaults to the
            host default encoding.
        fold_width (int): insert a newline every fold_width characters.
            Defaults to None (no folding, NEL becomes newline).
    """

    def __init__(self,
                 source_encoding=codec.EBCDIC_DEFAULT,
                 target_encoding=None,
                 fold_width=None):
        if target_encoding is None:
            target_encoding = codec.default_encoding()
        self.source_encoding = codec.lookup(source_encoding).name
        self.target_encoding = codec.lookup(target_encoding).name
        self.fold_width = check_fold_width(fold_width)

        logger.debug("Source encoding: {}".format(self.source_encoding))
        logger.debug("Target encoding: {}".format(self.target_encoding))
        logger.debug("Fold width: {}".format(self.fold_width))

    def convert_text(self, text):
        '''Normalizes an already decoded string. Returns string.'''
        return normalize(text, self.fold_width)

    def convert_bytes(self, data):
        '''Converts bytes in the source encoding to bytes in the target
        encoding.

        Raises ``DecodeError`` or ``EncodeError`` if the data can't be
        represented.
        '''
        text = codec.decode(data, self.source_encoding)
        converted = self.convert_text(text)
        return codec.encode(converted, self.target_encoding)

    def convert(self, source, destination):
        '''
        Converts one file. The whole source file is read before the
        destination is written. The destination folder must exist.

        Arguments:
            * source (str|Path): file to read
            * destination (str|Path): file to write, overwritten if it exists

        Any failure is raised as ``ConversionError`` with ``path`` set to
        source and the original exception in ``cause``.
        '''
        source = Path(source)
        destination = Path(destination)
        try:
            data = source.read_bytes()
            logger.debug("Read {} bytes from {}".format(len(data), source))
            converted = self.convert_bytes(data)
            destination.write_bytes(converted)
            logger.debug("Wrote {} bytes to {}".format(len(converted), destination))
        except (ConverterError, OSError) as e:
            error = ConversionError(source, e)
            error.add_context('destination', destination)
            raise error from e
        return len(converted)
