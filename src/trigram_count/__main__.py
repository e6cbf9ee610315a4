import sys

from trigram_count.cli import main

if __name__ == "__main__":
    sys.exit(main())
