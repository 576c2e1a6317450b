"""Allow ``python -m kubesnap``."""

from kubesnap.cli import main

main()
