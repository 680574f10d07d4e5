"""Entry point for running cutgraph as a module (python -m cutgraph)."""
import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
