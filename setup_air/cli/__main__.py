"""
Entry point for running setup-air CLI as a module.

Usage: python -m setup_air.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
