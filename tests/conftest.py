import logging.config
from pathlib import Path

import pytest
import yaml

from assemblyinfo_cli import MODULE_ROOT
from assemblyinfo_cli.config.settings import AssemblyInfoSettings, CustomAttribute
from tests.utils import path_logging_config


# noinspection PyUnusedLocal
@pytest.hookimpl
def pytest_configure(config: pytest.Config):
    """Loads logging config"""
    if not path_logging_config.is_file():
        return

    with open(path_logging_config, "r", encoding="utf-8") as file:
        log_config = yaml.full_load(file)

    log_config["loggers"][MODULE_ROOT] = log_config["loggers"]["test"]
    logging.config.dictConfig(log_config)


@pytest.fixture
def settings() -> AssemblyInfoSettings:
    """Yields a fully populated :py:class:`AssemblyInfoSettings` object as a pytest.fixture."""
    return AssemblyInfoSettings(
        title="MyLib",
        description="A library for \"testing\"",
        company="Company Ltd.",
        product="MyProduct",
        version="1.2.3.0",
        file_version="1.2.3.4",
        informational_version="1.2.3-beta+abc123",
        copyright="Copyright (c) Company Ltd. 2026",
        trademark="MyTrademark",
        configuration="Release",
        culture="en-GB",
        guid="c9b5a1f0-8d3e-4a3e-9c1b-2f6a7e5d4c3b",
        com_visible=False,
        cls_compliant=True,
        custom_namespaces=["System.Diagnostics", "System.Reflection"],
        internals_visible_to=["MyLib.Tests", "DynamicProxyGenAssembly2"],
        custom_attributes=[
            CustomAttribute(name="Debuggable", namespace="System.Diagnostics", value="true", use_raw_value=True),
        ],
    )


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """The path of the assembly info file to create as a pytest.fixture."""
    path = tmp_path.joinpath("Properties", "AssemblyInfo.cs")
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
