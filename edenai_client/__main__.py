"""Package entry point for ``python -m edenai_client``.

WHY: Lets users run the CLI without installing the ``edenai`` script.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.
"""

from edenai_client.cli import main

if __name__ == "__main__":
    main()
