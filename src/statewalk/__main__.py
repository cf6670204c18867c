"""Allow running statewalk as a module: python -m statewalk"""

from statewalk.cli import main

if __name__ == "__main__":
    main()
