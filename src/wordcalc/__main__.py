"""Allow ``python -m wordcalc``."""

from wordcalc.cli import main

if __name__ == "__main__":
    main()
