#!/usr/bin/env python3
"""
Main entry point for smithytool.
"""
from .cli.build_cli import cli


def main():
    """Run the smithytool command line."""
    cli(prog_name="smithytool")


if __name__ == "__main__":
    main()
