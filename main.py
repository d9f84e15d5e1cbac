"""
LifeOS Dashboard — Entry Point.

Single entry point: `python main.py [summary|export|import FILE]`.
"""

from src.cli.commands import main

if __name__ == "__main__":
    main()
