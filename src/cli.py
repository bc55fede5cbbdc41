#!/usr/bin/env python3
"""Main CLI entry point for the cricket stats dashboard."""

from cricket_dashboard.cli.main import app

if __name__ == '__main__':
    app()
