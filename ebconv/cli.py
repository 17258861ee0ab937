"""
Command line interface for folder conversion, used by ``convert_tree.py``.
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

import argparse
import logging

from . import codec
from .batch import TreeConverter
from .errors import ConverterError


def build_parser():
    desc = '''EBCDIC folder conversion utility'''
    arg_parser = argparse.ArgumentParser(description=desc,
                        usage='%(prog)s [options] SOURCE_DIR DESTINATION_DIR',
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    arg_parser.add_argument('--from', dest='source_encoding', help="Encoding of the source files (default: cp1047, or the host encoding with --reverse)", default=None)
    arg_parser.add_argument('--to', dest='target_encoding', help="Encoding of the converted files (default: host encoding, or cp1047 with --reverse)", default=None)
    arg_parser.add_argument('-r', '--reverse', help="Convert from the host encoding to EBCDIC", action="store_true", default=False)
    arg_parser.add_argument('-l', '--lrecl', help="Insert a newline every LRECL characters, 0 disables folding", default=0, type=int)
    arg_parser.add_argument('-q', '--quiet', help="Don't print conversion progress", action="store_true", default=False)
    arg_parser.add_argument('-d', '--debug', help="Print debugging statements", action="store_const", dest="loglevel", const=logging.DEBUG, default=logging.WARNING)
    arg_parser.add_argument('-p', '--print', help="Print a summary table after converting", action="store_true", default=False)
    arg_parser.add_argument('-H', '--human', help="Print filesizes as human readable", action="store_true", default=False)
    arg_parser.add_argument('-j', '--json', help="Write conversion results to this json file", default=None)
    arg_parser.add_argument('--list-encodings', help="List available EBCDIC code pages and exit", action="store_true", default=False)
    arg_parser.add_argument("SOURCE_DIR", help="Folder to convert", nargs="?")
    arg_parser.add_argument("DESTINATION_DIR", help="Folder to write converted files to", nargs="?")
    return arg_parser


def resolve_encodings(args):
    '''Returns (source, target) encodings from the parsed arguments.'''
    host = codec.default_encoding()
    if args.reverse:
        source, target = host, codec.EBCDIC_DEFAULT
    else:
        source, target = codec.EBCDIC_DEFAULT, host
    return args.source_encoding or source, args.target_encoding or target


def main(argv=None):
    arg_parser = build_parser()
    args = arg_parser.parse_args(argv)

    if args.list_encodings:
        for name in codec.codec_names():
            print(name)
        return 0

    if not args.SOURCE_DIR or not args.DESTINATION_DIR:
        arg_parser.error("SOURCE_DIR and DESTINATION_DIR are required")
    if args.lrecl < 0:
        arg_parser.error("LRECL must be 0 or a positive number")

    source_encoding, target_encoding = resolve_encodings(args)

    try:
        tree = TreeConverter(
            args.SOURCE_DIR,
            args.DESTINATION_DIR,
            source_encoding=source_encoding,
            target_encoding=target_encoding,
            fold_width=args.lrecl or None,
            loglevel=args.loglevel,
            quiet=args.quiet
        )
    except ConverterError as e:
        print(e)
        print("FAILURE")
        return 1

    success = tree.convert_all()

    if args.print:
        tree.print_results(human=args.human)

    if args.json:
        tree.dump_json(args.json)

    return 0 if success else 1
