"""Allow ``python -m create_vite``."""

from create_vite.orchestrator import main

if __name__ == "__main__":
    main()
