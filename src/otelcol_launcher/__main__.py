"""Allow running the launcher with ``python -m otelcol_launcher``."""

from otelcol_launcher.cli import main

if __name__ == "__main__":
    main()
