"""Package entry point for ``python -m titlecase_filter``.

WHY: Users run the filter as ``python -m titlecase_filter "some title"``
or pipe a JSON field document into ``python -m titlecase_filter --json -``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from titlecase_filter.cli import main

if __name__ == "__main__":
    main()
