#!/usr/bin/env python3

import sys

from ebconv.cli import main

sys.exit(main())
