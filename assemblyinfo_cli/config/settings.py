"""
Config objects describing the metadata to declare in a generated assembly info file.
"""
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from assemblyinfo_cli.utils import to_collection


def _to_str_tuple(values: Any) -> tuple[Any, ...]:
    """Coerce a single value or collection to a tuple, dropping any None entries"""
    return tuple(value for value in to_collection(values) or () if value is not None)


StrTuple = Annotated[tuple[str, ...], BeforeValidator(_to_str_tuple)]


class SettingsModel(BaseModel):
    """Base class for all settings models. Accepts both snake_case and camelCase keys."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="forbid")


class CustomAttribute(SettingsModel):
    name: str = Field(
        description="The name of the attribute e.g. 'AssemblyMetadata'",
    )
    namespace: str | None = Field(
        description="The namespace the attribute requires, if any",
        default=None,
    )
    value: bool | int | float | str | None = Field(
        description="The value to give the attribute",
        default=None,
    )
    use_raw_value: bool = Field(
        description="Write the value exactly as given instead of rendering it as a literal",
        default=False,
    )


class AssemblyInfoSettings(SettingsModel):
    title: str | None = Field(
        description="The title of the assembly",
        default=None,
    )
    description: str | None = Field(
        description="A short description of the assembly",
        default=None,
    )
    company: str | None = Field(
        description="The name of the company which produced the assembly",
        default=None,
    )
    product: str | None = Field(
        description="The name of the product the assembly is a part of",
        default=None,
    )
    version: str | None = Field(
        description="The version of the assembly",
        default=None,
    )
    file_version: str | None = Field(
        description="The version number of the assembly's file, as displayed by the host operating system",
        default=None,
    )
    informational_version: str | None = Field(
        description="Additional version information e.g. a semantic version with build metadata",
        default=None,
    )
    copyright: str | None = Field(
        description="The copyright notice of the assembly",
        default=None,
    )
    trademark: str | None = Field(
        description="The trademark notice of the assembly",
        default=None,
    )
    configuration: str | None = Field(
        description="The build configuration of the assembly e.g. 'Release'",
        default=None,
    )
    culture: str | None = Field(
        description="The culture supported by the assembly",
        default=None,
    )
    guid: str | None = Field(
        description="The GUID of the type library exposed to COM",
        default=None,
    )
    com_visible: bool | None = Field(
        description="Whether the types in the assembly are visible to COM components",
        default=None,
    )
    cls_compliant: bool | None = Field(
        description="Whether the assembly is compliant with the Common Language Specification",
        default=None,
    )

    custom_namespaces: StrTuple = Field(
        description="Additional namespaces to import in the generated file",
        default=(),
    )
    internals_visible_to: StrTuple = Field(
        description="The names of other assemblies which may access this assembly's internal types",
        default=(),
    )
    custom_attributes: tuple[CustomAttribute, ...] = Field(
        description="Additional attributes to declare after the built-in attributes",
        default=(),
    )
