"""Main entry point for running setsim as a module."""

from .cli import main

if __name__ == "__main__":
    main()
