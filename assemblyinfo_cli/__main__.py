"""
Main driver of the program.

User can run 'python -m assemblyinfo_cli ...' to access the program from this script.
"""
import logging
import sys
import traceback
from pathlib import Path
from time import perf_counter

from assemblyinfo_cli import MODULE_ROOT
from assemblyinfo_cli.cli import PARSER
from assemblyinfo_cli.config.core import AssemblyInfoConfig
from assemblyinfo_cli.printers import print_header, print_line, print_time

LOGGER = logging.getLogger(MODULE_ROOT)


###########################################################################
## Config and setup
###########################################################################
def setup(args: list[str] | None = None) -> AssemblyInfoConfig:
    """Parse args + config and configure logger."""
    parsed_args = PARSER.parse_args(args)

    output = Path(parsed_args.output).absolute() if parsed_args.output else None
    config = AssemblyInfoConfig.from_file(str(parsed_args.config), output=output)

    config.logging.configure_additional_loggers(__name__)
    config.logging.configure_logging()

    LOGGER.debug(f"Loaded config from: {parsed_args.config}")
    if parsed_args.dump:
        print(config.model_dump_yaml())

    return config


###########################################################################
## Core
###########################################################################
def main(args: list[str] | None = None) -> int:
    """Main driver for CLI operations. Returns the exit code of the program."""
    start_time = perf_counter()
    print_header()

    try:
        config = setup(args)
        path = config.create()
    except Exception:
        LOGGER.debug(traceback.format_exc())
        print(f"\33[91m{traceback.format_exc(0)}\33[0m")
        return 1

    print_line(f"Created: {path}")
    print_time(perf_counter() - start_time)
    logging.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
