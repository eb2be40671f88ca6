"""
Sets up parser for CLI arguments.
"""
from jsonargparse import ArgumentParser
from jsonargparse.typing import Path_fr

from assemblyinfo_cli import PROGRAM_NAME

PARSER = ArgumentParser(
    prog=PROGRAM_NAME,
    description="Generate an assembly info file from the metadata given in a YAML or JSON config file.",
)

PARSER.add_argument(
    "-c", "--config", type=Path_fr, required=True,
    help="The path to the configuration file for this execution"
)
PARSER.add_argument(
    "-o", "--output", type=str | None, default=None,
    help="The path of the assembly info file to create. Overrides the output path given in the config file"
)
PARSER.add_argument(
    "--dump", action="store_true",
    help="Print the loaded config as YAML before creating the file"
)
