import os.path
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional

from jarc.config import DEFAULT_CONFIG_FILE, Config, UIAdapter, get_config, loader
from jarc.config.version import get_version
from jarc.log import setup
from jarc.ui.base import UIBase
from jarc.ui.console import PlainConsoleUI
from jarc.ui.virtual import VirtualUI


def parse_arguments(argv: Optional[list[str]] = None) -> Namespace:
    """
    Parse command-line arguments.

    Available arguments:
        command: Optional command (update, open); anything else starts the wizard
        platform: Platform for the command (android, ios)
        --help: Show the help message
        --config: Path to the configuration file
        --show-config: Output the configuration to stdout
        --level: Log level (debug,info,warning,error,critical)
        --version: Show the version and exit
    :return: Parsed arguments object.
    """
    version = get_version()

    parser = ArgumentParser(prog="jarc", description="Create and manage hybrid mobile app projects")
    parser.add_argument("command", nargs="?", help="Command to run: update, open (default: create a new project)")
    parser.add_argument("platform", nargs="?", help="Platform for the command: android, ios (default: android)")
    parser.add_argument("--config", help=f"Path to the configuration file (default: {DEFAULT_CONFIG_FILE})")
    parser.add_argument("--show-config", help="Output the configuration to stdout", action="store_true")
    parser.add_argument("--level", help="Log level (debug,info,warning,error,critical)", required=False)
    parser.add_argument("--version", action="version", version=version)
    return parser.parse_args(argv)


def load_config(args: Namespace) -> Optional[Config]:
    """
    Load JARC JSON configuration file and apply command-line arguments.

    If no configuration file is given, `jarc.json` in the current
    directory is used if it exists.

    :param args: Command-line arguments (at least `config` must be present).
    :return: Configuration object, or None if config couldn't be loaded.
    """
    config_path = args.config or DEFAULT_CONFIG_FILE

    if os.path.isfile(config_path):
        try:
            config = loader.load(config_path)
        except ValueError as err:
            print(f"Error parsing config file {config_path}: {err}", file=sys.stderr)
            return None
    else:
        if args.config:
            print(f"Configuration file not found: {args.config}; using default", file=sys.stderr)
        config = get_config()

    if args.level:
        config.log.level = args.level.upper()

    try:
        Config.model_validate(config.model_dump())
    except ValueError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return None

    return config


def show_config():
    """
    Print the current configuration to stdout.
    """
    cfg = get_config()
    print(cfg.model_dump_json(indent=2))


def init(argv: Optional[list[str]] = None) -> tuple[Optional[UIBase], Namespace]:
    """
    Initialize the application.

    Loads configuration, sets up logging and UI.

    :return: Tuple with UI (None if the configuration couldn't be loaded) and command-line arguments.
    """
    args = parse_arguments(argv)
    config = load_config(args)
    if not config:
        return (None, args)

    setup(config.log, force=True)

    if config.ui.type == UIAdapter.VIRTUAL:
        ui = VirtualUI(config.ui.inputs)
    else:
        ui = PlainConsoleUI()

    return (ui, args)


__all__ = ["parse_arguments", "load_config", "show_config", "init"]
