"""Package entry point for ``python -m btoa``.

WHY: Lets users run the converter without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from btoa.cli import main

if __name__ == "__main__":
    main()
