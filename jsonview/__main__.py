"""Allow ``python -m jsonview``."""

from jsonview.tui.app import main

if __name__ == "__main__":
    main()
