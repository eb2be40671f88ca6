import pytest

from assemblyinfo_cli.exception import AssemblyInfoError, InvalidArgumentError, FileSystemError, ParserError
from assemblyinfo_cli.utils import SafeDict, to_collection, unique, merge_maps


def test_safe_dict():
    assert "{key} and {value}".format_map(SafeDict(value="val")) == "{key} and val"


def test_to_collection():
    assert to_collection(None) is None
    assert to_collection("value") == ("value",)
    assert to_collection(["value1", "value2"]) == ("value1", "value2")
    assert to_collection({"key": "value"}) == ({"key": "value"},)
    assert to_collection(("value",)) == ("value",)
    assert to_collection({"value"}, cls=list) == ["value"]


def test_unique():
    assert unique(["b", "a", "b", "c", "a"]) == ("b", "a", "c")
    assert unique([]) == ()


def test_merge_maps():
    source = {"key1": "value1", "key2": {"sub1": [1, 2], "sub2": "value"}}
    new = {"key2": {"sub1": [3], "sub2": "new", "sub3": "value"}, "key3": "value3"}

    assert merge_maps(source.copy() | {"key2": source["key2"].copy()}, new, extend=False, overwrite=False) == {
        "key1": "value1", "key2": {"sub1": [1, 2], "sub2": "value", "sub3": "value"}, "key3": "value3",
    }
    assert merge_maps(source, new, extend=True, overwrite=True) == {
        "key1": "value1", "key2": {"sub1": [1, 2, 3], "sub2": "new", "sub3": "value"}, "key3": "value3",
    }


###########################################################################
## Exceptions
###########################################################################
def test_error_formats_key_and_value():
    assert str(AssemblyInfoError("Error")) == "Error"
    assert str(AssemblyInfoError("Error", key="key", value="value")) == "Error: key='key' | value='value'"
    assert str(AssemblyInfoError("Error for {key}", key=["parent", "child"])) == "Error for parent->child"
    assert str(ParserError(value=["val1", "val2"])) == "Could not process config: value='val1, val2'"


def test_error_types():
    error = InvalidArgumentError(key="settings")
    assert str(error) == "Invalid argument given for settings"
    assert isinstance(error, ValueError)

    error = FileSystemError(value="/path/to/file")
    assert isinstance(error, OSError)
    assert error.value == "/path/to/file"

    with pytest.raises(AssemblyInfoError):
        raise FileSystemError()
