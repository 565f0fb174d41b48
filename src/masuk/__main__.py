"""Entry point for running masuk as a module.

This allows running the CLI with:
    python -m masuk
"""

from masuk.cli.main import main

if __name__ == "__main__":
    main()
