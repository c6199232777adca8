"""Allow running as ``python -m skills_loader``."""

from skills_loader.cli.app import main

if __name__ == "__main__":
    main()
