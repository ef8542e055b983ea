"""Allow running gf as ``python -m gf``."""

from gf.cli.main import main

if __name__ == "__main__":
    main()
