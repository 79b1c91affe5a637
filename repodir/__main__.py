"""Entry point for running repodir as a module.

    python -m repodir TYPE REPO
"""

from . import cli

if __name__ == "__main__":
    cli._main()
