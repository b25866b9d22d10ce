"""Command-line entry point: python -m bmicalculator"""
import sys

from bmicalculator.app.main import main

if __name__ == "__main__":
    sys.exit(main())
