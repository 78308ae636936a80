"""Application entry point — loads the user config and prints what was resolved.

`tzclock [--debug]` reads ~/.config/tz/conf.toml, resolves every configured
zone, and prints the zone labels and key bindings the clock would use.

This is the only place that terminates the process on a bad config:
ConfigParseError and ZoneLookupError exit with status 1.
"""

import logging
import sys

USAGE = "usage: tzclock [--debug]"


def _print_config(config) -> None:
    """Print zones and bound actions of a loaded Config."""
    if config.header:
        print(config.header)
    if not config.zones:
        print("No zones configured.")
    for zone in config.zones:
        print(f"{zone.name}  [{zone.db_name}]")
    for action, keys in config.keymaps.to_dict().items():
        if keys:
            print(f"{action}: {', '.join(keys)}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    debug = False
    for arg in args:
        if arg == "--debug":
            debug = True
        elif arg in ("-h", "--help"):
            print(USAGE)
            return
        else:
            print(f"Error: unknown argument '{arg}'", file=sys.stderr)
            print(USAGE, file=sys.stderr)
            sys.exit(2)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )

    from .errors import ConfigParseError, ZoneLookupError
    from .settings import load_config_file

    try:
        config = load_config_file()
    except ConfigParseError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        print("Fix or remove the config file and try again.", file=sys.stderr)
        sys.exit(1)
    except ZoneLookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _print_config(config)


if __name__ == "__main__":
    main()
