"""Allow ``python -m express_backend_cli``."""

from express_backend_cli.cli import main

main()
