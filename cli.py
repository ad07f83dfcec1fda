#!/usr/bin/env python
"""
pom-actions CLI entry point.

Usage:
    python cli.py catalog                          # List supported actions
    python cli.py describe pages.login:LoginPage   # Show generated methods
    python cli.py check pages.login:LoginPage      # Validate a page object
"""

from pom_actions.cli.app import main

if __name__ == "__main__":
    main()
