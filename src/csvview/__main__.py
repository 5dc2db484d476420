"""
CLI entry point for the csvview package.

This allows running the package with: python -m csvview
"""

from .cli import main

if __name__ == "__main__":
    main()
