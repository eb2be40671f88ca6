import json
import logging.config
from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, Field, ValidationError, computed_field, model_validator

from assemblyinfo_cli import PROGRAM_NAME, MODULE_ROOT
from assemblyinfo_cli.config.loader import MultiFileLoader
from assemblyinfo_cli.config.settings import AssemblyInfoSettings
from assemblyinfo_cli.creator import AssemblyInfoCreator, Environment
from assemblyinfo_cli.exception import ParserError


###########################################################################
## Runtime
###########################################################################
class Logging(BaseModel):
    version: int = Field(
        description="Value representing the schema version",
        default=1,
    )
    formatters: dict[str, Any] = Field(
        description="A map of formatter IDs to maps describing how to configure the corresponding Formatter instance",
        default_factory=dict,
    )
    filters: dict[str, Any] = Field(
        description="A map of filter IDs to maps describing how to configure the corresponding Filter instance",
        default_factory=dict,
    )
    handlers: dict[str, Any] = Field(
        description="A map of handler IDs to maps describing how to configure the corresponding Handler instance",
        default_factory=dict,
    )
    loggers: dict[str, Any] = Field(
        description="A map of logger names to maps describing how to configure the corresponding Logger instance",
        default_factory=dict,
    )
    root: dict[str, Any] = Field(
        description="The configuration for the root logger instance",
        default_factory=dict,
    )
    incremental: bool = Field(
        description="Whether the configuration is to be interpreted as incremental to the existing configuration",
        default=False,
    )
    disable_existing_loggers: bool = Field(
        description="Whether any existing non-root loggers are to be disabled",
        default=False,
    )

    name: str | None = Field(
        description="The logger settings to use for this run as found in the 'loggers' config",
        default=None
    )

    @computed_field(
        description="The configuration for the selected logger"
    )
    @property
    def logger(self) -> dict[str, Any]:
        """The configuration for the selected logger"""
        return self.loggers.get(self.name, {})

    @model_validator(mode="after")
    def fix_ansi_codes_in_formatters(self) -> Self:
        """Reformat ANSI colour codes in formatter configurations"""
        for formatter in self.formatters.values():
            if (format_key := "format") in formatter:
                formatter[format_key] = formatter[format_key].replace(r"\33", "\33")

        return self

    @model_validator(mode="after")
    def add_key_loggers(self) -> Self:
        """Add loggers for the key packages in this application"""
        if self.name and self.name in self.loggers:
            self.configure_additional_loggers(MODULE_ROOT)
        return self

    def configure_additional_loggers(self, *names: str) -> None:
        """
        Set additional loggers with the given names with the config of the currently selected logger

        :param names: The names of the additional loggers to set.
        """
        for name in names:
            self.loggers[name] = self.logger

    def configure_logging(self) -> None:
        """Configures logging using the currently stored config."""
        config_keys = {
            "version", "formatters", "filters", "handlers", "loggers", "root", "incremental", "disable_existing_loggers"
        }
        config = self.model_dump(include=config_keys)

        logging.config.dictConfig(config)

        if self.logger:
            logging.getLogger(MODULE_ROOT).debug(f"Logging config set to: {self.name}")


###########################################################################
## Generation
###########################################################################
class AssemblyInfoConfig(BaseModel):
    output: Path = Field(
        description="The path of the assembly info file to create. "
                    "Relative paths are resolved against the directory of the config file when loaded from a file",
    )
    settings: AssemblyInfoSettings = Field(
        description="The metadata to declare in the assembly info file",
        default_factory=AssemblyInfoSettings,
    )

    # runtime
    tool_name: str = Field(
        description="The name of the tool to credit in the header of the generated file",
        default=PROGRAM_NAME,
    )
    newline: Literal["\n", "\r\n", "\r"] = Field(
        description="The line terminator to write in the generated file",
        default="\n",
    )
    byte_order_mark: bool = Field(
        description="Write a UTF-8 byte order mark at the start of the generated file",
        default=False,
    )
    logging: Logging = Field(
        description="Configuration for the runtime logger",
        default_factory=Logging,
    )

    @classmethod
    def from_file(cls, config_file_path: str | Path, **overrides: Any) -> Self:
        """
        Create config from the config found in the given ``config_file_path``

        :param config_file_path: The path of the YAML or JSON config file to load.
        :param overrides: Top-level config values to use in place of those in the file. None values are ignored.
        :raise ParserError: If the file cannot be loaded or its config is not valid.
        """
        config_file_path = Path(config_file_path)
        try:
            config_map = MultiFileLoader.load(config_file_path)
        except (yaml.YAMLError, json.JSONDecodeError) as ex:
            raise ParserError(f"Could not parse config file: {ex}", value=config_file_path) from ex

        if not isinstance(config_map, dict):
            raise ParserError("Config file does not contain a mapping", value=config_file_path)
        config_map |= {key: value for key, value in overrides.items() if value is not None}

        try:
            config = cls(**config_map)
        except ValidationError as ex:
            raise ParserError(f"Invalid config in file: {config_file_path}\n{ex}") from ex

        config.output = Environment(config_file_path.absolute().parent).make_absolute(config.output)
        return config

    def create(self, environment: Environment | None = None) -> Path:
        """Create the assembly info file for this config, returning the absolute path of the created file"""
        creator = AssemblyInfoCreator(
            environment=environment,
            tool_name=self.tool_name,
            newline=self.newline,
            byte_order_mark=self.byte_order_mark,
        )
        return creator.create(self.output, self.settings)

    def model_dump_yaml(self) -> str:
        """Generates a YAML representation of the model using ``yaml.safe_dump``."""
        data = json.loads(self.model_dump_json(exclude={"logging"}, exclude_defaults=True))
        return yaml.safe_dump(data, indent=2, default_flow_style=False, allow_unicode=True, sort_keys=False)
