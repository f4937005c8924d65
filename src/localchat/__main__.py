"""Entry point for running localchat as a module.

This allows running: python -m localchat
"""

from .cli import main

if __name__ == "__main__":
    # main() is the CLI boundary and already handles all exceptions.
    main()
