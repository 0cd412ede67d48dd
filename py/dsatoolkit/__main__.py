"""Entry point for running dsatoolkit as a module (python -m dsatoolkit)."""
import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
