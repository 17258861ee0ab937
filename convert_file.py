#!/usr/bin/env python3

import ebconv
import sys

if len(sys.argv) < 2:
    print("usage:\n\n{} ebcdic_file [record length] [ebcdic codepage]".format(sys.argv[0]))
    print("\nset record length to 0 to not add new lines every [record length]\nDefault record length is 0\nDefault codepage is cp1047")
    sys.exit()

lrecl = 0
cp = ebconv.EBCDIC_DEFAULT
if len(sys.argv) >= 3:
    lrecl = int(sys.argv[2])
if len(sys.argv) >= 4:
    cp = sys.argv[3]

with open(sys.argv[1], 'rb') as eb_file:
    ebcdic_file = eb_file.read()

print(ebconv.convert_ebcdic(ebcdic_file, lrecl or None, encoding=cp), end='')
