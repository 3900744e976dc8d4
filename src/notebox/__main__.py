"""Allow running Notebox with ``python -m notebox``."""

from notebox.main import main

if __name__ == "__main__":
    main()
