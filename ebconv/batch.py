"""
Folder conversion.

Walks a source folder, converts every visible file with a ``FileConverter``
and writes the result to the same relative path under the destination
folder. One bad file doesn't stop the rest, it is logged and reported.
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

from collections import namedtuple
from pathlib import Path
from prettytable import PrettyTable

import json
import logging
import time

from . import codec
from .converter import FileConverter
from .errors import ConversionError, ConverterError

FileResult = namedtuple('FileResult', ['source', 'destination', 'size', 'error'])


def is_hidden(path):
    return path.name.startswith('.')


def list_files(directory):
    '''Returns the sorted relative paths of every file under directory.

    Hidden files are skipped, and so is everything inside a hidden folder.
    '''
    directory = Path(directory)
    files = []
    for entry in sorted(directory.iterdir()):
        if is_hidden(entry):
            continue
        if entry.is_dir():
            files += [entry.relative_to(directory) / f for f in list_files(entry)]
        elif entry.is_file():
            files.append(entry.relative_to(directory))
    return files


def sizeof_fmt(num):
    '''Returns human friendly size of int.'''
    for unit in ['', 'K', 'M', 'G', 'T', 'P', 'E', 'Z']:
        if abs(num) < 1024.0:
            size = "{:3.1f}".format(num)
            if size.endswith('.0'):
                size = size[:-2]
            return "{}{}".format(size.strip(), unit)
        num /= 1024.0
    return "{:.1f}{}".format(num, 'Y')


class TreeConverter:
    """
    Folder conversion class.
    ========================

    Converts all files in a folder (recursively) from one encoding to
    another, mirroring the folder layout in the destination. Missing
    destination folders are created.

    Examples:
        Convert a folder of EBCDIC files with 80 byte records::

            >>> from ebconv import TreeConverter
            >>> tree = TreeConverter("/path/to/ebcdic", "/path/to/text",
            ...                      source_encoding='cp1047',
            ...                      target_encoding='utf-8',
            ...                      fold_width=80)
            >>> tree.convert_all()
            True
            >>> tree.print_results()

    Args:
        source (str): folder containing the files to convert.
        destination (str): folder to write converted files to.
        source_encoding (str): encoding of the source files.
            Defaults to cp1047.
        target_encoding (str): encoding of the converted files. Defaults to
            the host default encoding.
        fold_width (int): insert a newline every fold_width characters.
            Defaults to None.
        loglevel (int): Level of logging, based on
            https://docs.python.org/3/library/logging.html#levels.
            Defaults to ``logging.WARNING``.
        quiet (bool): Do not print progress messages. Default to False.
    """

    def __init__(self,
                 source,
                 destination,
                 source_encoding=codec.EBCDIC_DEFAULT,
                 target_encoding=None,
                 fold_width=None,
                 loglevel=logging.WARNING,
                 quiet=False):
        self.source = Path(source)
        self.destination = Path(destination)
        self.quiet = quiet
        self.loglevel = loglevel
        self.results = []
        self.elapsed = None

        # Create the Logger
        self.logger = logging.getLogger('ebconv')
        self.logger.setLevel(logging.DEBUG)
        logger_formatter = logging.Formatter(
            '%(levelname)s :: %(funcName)s :: %(message)s')
        # Log to stderr
        ch = logging.StreamHandler()
        ch.setFormatter(logger_formatter)
        ch.setLevel(loglevel)
        if not self.logger.hasHandlers():
            self.logger.addHandler(ch)

        if not self.source.is_dir():
            raise ConverterError(
                "No such directory :: {}".format(self.source),
                {'path': self.source})

        self.converter = FileConverter(
            source_encoding, target_encoding, fold_width)

        self.logger.debug("Source: {}".format(self.source))
        self.logger.debug("Destination: {}".format(self.destination))
        self.logger.debug("quiet: {}".format(quiet))

    def convert_all(self):
        '''
        Converts every file in the source folder.

        Returns True if all files were converted. Failed files are logged,
        recorded in ``results`` and skipped.
        '''
        start = time.perf_counter()
        self.results = []
        for relative in list_files(self.source):
            self.results.append(self.convert_file(relative))

        self.elapsed = int((time.perf_counter() - start) * 1000)
        success = all(r.error is None for r in self.results)
        self._print("SUCCESS" if success else "FAILURE")
        self._print("Total elapsed time: {} ms".format(self.elapsed))
        return success

    def convert_file(self, relative):
        '''Converts one file given its path relative to the source folder.
        Returns a ``FileResult``.'''
        source_file = self.source / relative
        dest_file = self.destination / relative
        self._print("Converting => {} into => {}".format(source_file, dest_file))
        try:
            dest_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._failed(source_file, dest_file, ConversionError(source_file, e))
        try:
            size = self.converter.convert(source_file, dest_file)
        except ConversionError as e:
            return self._failed(source_file, dest_file, e)
        return FileResult(source_file, dest_file, size, None)

    def get_failures(self):
        '''Returns the results of the files that failed to convert.'''
        return [r for r in self.results if r.error is not None]

    def print_results(self, human=True):
        '''Prints a table with one row per converted file.

        Arguments:
            human (bool): Is True converts file sizes to human readable.
                Default is True.
        '''
        self.logger.debug("Printing results. Human file sizes: {}".format(human))
        table = PrettyTable()
        table.field_names = ['file', 'destination', 'size', 'status']
        table.align['file'] = 'l'
        table.align['destination'] = 'l'
        table.align['size'] = 'r'
        for r in self.results:
            if r.size is None:
                size = ''
            elif human:
                size = sizeof_fmt(r.size)
            else:
                size = "{}".format(r.size)
            status = 'OK' if r.error is None else 'FAILED'
            table.add_row([r.source, r.destination, size, status])
        print(table)

    def get_json(self, indent=2):
        '''Returns a json string with the settings and per file results.'''
        report = {
            'source': self.source,
            'destination': self.destination,
            'source_encoding': self.converter.source_encoding,
            'target_encoding': self.converter.target_encoding,
            'fold_width': self.converter.fold_width,
            'elapsed_ms': self.elapsed,
            'files': [
                {
                    'source': r.source,
                    'destination': r.destination,
                    'size': r.size,
                    'error': str(r.error.cause) if r.error is not None else None,
                }
                for r in self.results
            ],
        }
        return json.dumps(report, default=str, indent=indent)

    def dump_json(self, json_file_target):
        '''Writes ``get_json()`` to json_file_target.'''
        json_file_target = Path(json_file_target)
        self.logger.debug("Dumping JSON to {}".format(json_file_target.absolute()))
        json_file_target.write_text(self.get_json())

    def _failed(self, source_file, dest_file, error):
        self.logger.error("Unable to convert file :: {} :: {}".format(source_file, error.cause))
        return FileResult(source_file, dest_file, None, error)

    def _print(self, message):
        if not self.quiet:
            print(message)
