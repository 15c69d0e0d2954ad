"""Allow ``python -m javadoc_zip``."""
from __future__ import annotations

from javadoc_zip.cli.main import cli

if __name__ == "__main__":
    cli()
