"""
Entry point for running setup-air as a module.

Usage: python -m setup_air [command] [options]
"""

from setup_air.cli.parser import main

if __name__ == "__main__":
    main()
