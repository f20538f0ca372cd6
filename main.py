# main.py - run the interactive autocompleter
# Usage: python main.py [path/to/dictionary/file]

import sys

from trie_autocompleter.cli import main

if __name__ == "__main__":
    sys.exit(main())
