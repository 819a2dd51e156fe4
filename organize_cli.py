#!/usr/bin/env python3
"""
extsort - Command Line Interface
Sorts the files of a folder into category subfolders by extension.
"""

from extsort.organizer import main

if __name__ == "__main__":
    main()
