"""Package entry point for ``python -m serbzip``.

WHY: Users run the compressor as ``python -m serbzip --compress ...``
without relying on the console script being on PATH.

HOW: Delegates to the CLI's main() and exits with its status code.
"""

import sys

from serbzip.cli import main

if __name__ == "__main__":
    sys.exit(main())
