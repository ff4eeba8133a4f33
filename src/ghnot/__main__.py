"""Allow ``python -m ghnot``."""

from ghnot.cli import cli_main

cli_main()
