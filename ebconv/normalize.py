"""
Character substitution applied between decoding and encoding.

Three rules are applied to every character, in order:

* Fixed width folding. If a fold width is set a newline is inserted before
  every character whose index is a nonzero multiple of the width. Mainframe
  fixed length (RECFM=F) files have no line terminators, every record is
  exactly LRECL long, so this rebuilds the lines.
* NEL remapping. Without folding the decoded character U+0015 becomes a
  newline. With folding it is left alone. Under cp037/cp1047 it comes from
  byte 0x3D; EBCDIC byte 0x15 decodes to U+0085, which is non-printable.
* Non-printable replacement. Characters in ``NON_PRINTABLE`` become a space.
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

LF = '\n'
NEL = '\x15'
WS = ' '

# Unicode values of the EBCDIC control characters plus the no-break space.
NON_PRINTABLE = frozenset(chr(c) for c in (
    0x00, 0x01, 0x02, 0x03, 0x9C, 0x09, 0x86, 0x7F, 0x97, 0x8D, 0x8E, 0x0B,
    0x0C, 0x0D, 0x0E, 0x0F, 0x10, 0x11, 0x12, 0x13, 0x9D, 0x85, 0x08, 0x87,
    0x18, 0x19, 0x92, 0x8F, 0x1C, 0x1D, 0x1E, 0x1F, 0x80, 0x81, 0x82, 0x83,
    0x84, 0x0A, 0x17, 0x1B, 0x88, 0x89, 0x8A, 0x8B, 0x8C, 0x05, 0x06, 0x07,
    0x90, 0x91, 0x16, 0x93, 0x94, 0x95, 0x96, 0x04, 0x98, 0x99, 0x9A, 0x9B,
    0x14, 0x9E, 0x1A, 0x20, 0xA0,
))


def is_printable(char):
    '''Returns False if char is replaced by a space during conversion.'''
    return char not in NON_PRINTABLE


def check_fold_width(fold_width):
    '''Returns fold_width if it is None or a positive int, raises ValueError
    otherwise.'''
    if fold_width is None:
        return None
    if isinstance(fold_width, bool) or not isinstance(fold_width, int) or fold_width < 1:
        raise ValueError(
            "fold width must be a positive integer, got {!r}".format(fold_width))
    return fold_width


def normalize(text, fold_width=None):
    '''
    Applies folding, NEL remapping and non-printable replacement to text and
    returns the new string.

    Arguments:
        * text (str): decoded characters
        * fold_width (int): insert a newline every fold_width characters.
          None disables folding (and enables NEL remapping).

    Break positions count input characters, inserted newlines don't shift
    them. Folding ``'ABCDE'`` at 2 gives ``'AB\\nCD\\nE'``; there is never
    a break before the first character or after the last one.
    '''
    fold_width = check_fold_width(fold_width)
    out = []
    for index, char in enumerate(text):
        if fold_width is not None and index > 0 and index % fold_width == 0:
            out.append(LF)
        if fold_width is None and char == NEL:
            out.append(LF)
        elif char in NON_PRINTABLE:
            out.append(WS)
        else:
            out.append(char)
    return ''.join(out)
