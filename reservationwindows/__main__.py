"""
Convenience entry point for running reservationwindows directly.

Usage: python -m reservationwindows [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
