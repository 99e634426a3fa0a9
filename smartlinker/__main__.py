"""Allow `python -m smartlinker`."""

from smartlinker.interfaces.cli.cli_main import main

if __name__ == "__main__":
    raise SystemExit(main())
