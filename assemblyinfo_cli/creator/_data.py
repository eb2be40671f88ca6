"""
Projects :py:class:`AssemblyInfoSettings` onto the data needed to write an assembly info file.
"""
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from assemblyinfo_cli.config.settings import AssemblyInfoSettings, CustomAttribute
from assemblyinfo_cli.utils import unique

NAMESPACE_SYSTEM = "System"
NAMESPACE_SYSTEM_REFLECTION = "System.Reflection"
NAMESPACE_SYSTEM_RUNTIME_INTEROP_SERVICES = "System.Runtime.InteropServices"
NAMESPACE_SYSTEM_RUNTIME_COMPILER_SERVICES = "System.Runtime.CompilerServices"

INTERNALS_VISIBLE_TO = f"{NAMESPACE_SYSTEM_RUNTIME_COMPILER_SERVICES}.InternalsVisibleTo"

_STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\"": "\\\"",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
})


###########################################################################
## Renderers
###########################################################################
def render_string(value: Any) -> str:
    """Render the given ``value`` as a quoted, escaped string literal"""
    return f"\"{str(value).translate(_STRING_ESCAPES)}\""


def render_guid(value: Any) -> str:
    """Render the given GUID ``value`` as a quoted string literal"""
    return render_string(value)


def render_boolean(value: bool) -> str:
    """Render the given ``value`` as a lowercase boolean literal"""
    return "true" if value else "false"


def render_custom(attribute: CustomAttribute) -> str:
    """Render the value of a :py:class:`CustomAttribute` according to its type"""
    if attribute.use_raw_value:
        return str(attribute.value)
    if isinstance(attribute.value, bool):
        return render_boolean(attribute.value)
    if isinstance(attribute.value, int | float):
        return str(attribute.value)
    return render_string(attribute.value)


def render_grant(name: str) -> str:
    """Render an internal visibility grant for the assembly with the given ``name``"""
    return f"{INTERNALS_VISIBLE_TO}({render_string(unquote(name))})"


def unquote(value: str) -> str:
    """Strip whitespace and one pair of surrounding double quotes from the given ``value``"""
    value = value.strip()
    if len(value) >= 2 and value.startswith("\"") and value.endswith("\""):
        value = value[1:-1]
    return value


def is_empty(value: Any) -> bool:
    """Whether the given ``value`` should be treated as not set"""
    return value is None or (isinstance(value, str) and not value.strip())


###########################################################################
## Attribute table
###########################################################################
@dataclass(frozen=True)
class AttributeDefinition:
    """Maps a settings field to the attribute it is declared as."""
    setting: str
    name: str
    namespace: str
    render: Callable[[Any], str] = render_string


#: The built-in attributes in the order they are declared.
#: Add any new attributes to the end of this table to keep output stable.
ATTRIBUTE_TABLE: tuple[AttributeDefinition, ...] = (
    AttributeDefinition("title", "AssemblyTitle", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("description", "AssemblyDescription", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("company", "AssemblyCompany", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("product", "AssemblyProduct", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("version", "AssemblyVersion", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("file_version", "AssemblyFileVersion", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("informational_version", "AssemblyInformationalVersion", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("copyright", "AssemblyCopyright", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("trademark", "AssemblyTrademark", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("configuration", "AssemblyConfiguration", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("culture", "AssemblyCulture", NAMESPACE_SYSTEM_REFLECTION),
    AttributeDefinition("guid", "Guid", NAMESPACE_SYSTEM_RUNTIME_INTEROP_SERVICES, render_guid),
    AttributeDefinition("com_visible", "ComVisible", NAMESPACE_SYSTEM_RUNTIME_INTEROP_SERVICES, render_boolean),
    AttributeDefinition("cls_compliant", "CLSCompliant", NAMESPACE_SYSTEM, render_boolean),
)


###########################################################################
## Creator data
###########################################################################
@dataclass(frozen=True)
class AssemblyInfoCreatorData:
    """
    The write-ready representation of an assembly info file.

    :param namespaces: The namespaces to import, without duplicates.
    :param attributes: Map of attribute name to the rendered text to place inside the attribute's parentheses.
    :param internal_visible_to: The rendered internal visibility grants.
    """
    namespaces: tuple[str, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    internal_visible_to: tuple[str, ...] = ()

    @classmethod
    def from_settings(cls, settings: AssemblyInfoSettings) -> Self:
        """Derive the data to write for the given ``settings``"""
        namespaces: list[str] = []
        attributes: dict[str, str] = {}

        for definition in ATTRIBUTE_TABLE:
            value = getattr(settings, definition.setting)
            if is_empty(value):
                continue

            attributes[definition.name] = definition.render(value)
            namespaces.append(definition.namespace)

        for attribute in settings.custom_attributes:
            if is_empty(attribute.name) or is_empty(attribute.value):
                continue

            # replaces the value of a built-in attribute with the same name, keeping its position
            attributes[attribute.name.strip()] = render_custom(attribute)
            if not is_empty(attribute.namespace):
                namespaces.append(attribute.namespace.strip())

        namespaces.extend(namespace.strip() for namespace in settings.custom_namespaces if not is_empty(namespace))
        grants = tuple(render_grant(name) for name in settings.internals_visible_to if not is_empty(unquote(name)))

        return cls(
            namespaces=unique(namespaces),
            attributes=MappingProxyType(attributes),
            internal_visible_to=grants,
        )
