"""Allow ``python -m latest_json_cli``."""

from latest_json_cli.cli import main

if __name__ == "__main__":
    main()
