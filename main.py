#!/usr/bin/env python3
"""RAM Utils - Convert file and directory names to upper or lower case."""

from ram_utils.cli import main

if __name__ == "__main__":
    main()
