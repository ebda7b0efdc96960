import sys

from recent_commander.cli import main

if __name__ == "__main__":
    sys.exit(main())
