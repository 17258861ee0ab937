"""
Exceptions raised while converting files.

Every error carries a ``context`` dict with the details needed to locate
the problem (encoding, position, file path) so callers don't have to parse
messages.
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


class ConverterError(Exception):
    '''Base class for all ebconv errors.

    Args:
        message (str): error message
        context (dict): optional structured information about the failure
    '''

    def __init__(self, message, context=None):
        super().__init__(message)
        self.context = dict(context or {})

    def __str__(self):
        base_msg = super().__str__()
        if not self.context:
            return base_msg
        details = ", ".join("{}={}".format(k, v) for k, v in self.context.items())
        return "{} ({})".format(base_msg, details)

    def add_context(self, key, value):
        self.context[key] = value

    def get_context(self, key, default=None):
        return self.context.get(key, default)


class EncodingError(ConverterError, LookupError):
    '''The encoding name does not resolve to a known codec.'''

    def __init__(self, encoding, reason='is an unknown encoding'):
        super().__init__(
            "'{}' {}".format(encoding, reason),
            {'encoding': encoding})
        self.encoding = encoding


class DecodeError(ConverterError, ValueError):
    '''Input bytes are not valid under the source encoding.'''

    def __init__(self, encoding, position, reason):
        super().__init__(
            "Unable to decode input as {}".format(encoding),
            {'encoding': encoding, 'position': position, 'reason': reason})
        self.encoding = encoding
        self.position = position


class EncodeError(ConverterError, ValueError):
    '''A character has no representation in the target encoding.'''

    def __init__(self, encoding, position, character):
        super().__init__(
            "Unable to encode character as {}".format(encoding),
            {'encoding': encoding, 'position': position,
             'character': "U+{:04X}".format(ord(character))})
        self.encoding = encoding
        self.position = position
        self.character = character


class ConversionError(ConverterError):
    '''Converting one file failed.

    ``path`` is the source file and ``cause`` the underlying exception
    (an ``EncodingError``, ``DecodeError``, ``EncodeError`` or ``OSError``).
    '''

    def __init__(self, path, cause):
        super().__init__(
            "Unable to convert file :: {}".format(path),
            {'cause': "{}: {}".format(type(cause).__name__, cause)})
        self.path = path
        self.cause = cause
