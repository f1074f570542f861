"""Package entry point for ``python -m speed_reader``."""

from speed_reader.cli import main

if __name__ == "__main__":
    main()
