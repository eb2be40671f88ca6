"""
Handles loading of config from a config file (e.g. YAML or JSON).
"""
import json
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from functools import partial
from io import TextIOWrapper
from pathlib import Path
from typing import Any

import yaml

from assemblyinfo_cli.exception import ParserError
from assemblyinfo_cli.utils import to_collection, merge_maps


class MultiFileLoader(yaml.SafeLoader):
    """YAML/JSON loader which merges in additional YAML/JSON files from paths found within a given parent file."""

    #: The key in a mapping whose value gives the path/s of files to merge into that mapping
    include_key: str = "include"

    @classmethod
    def load(cls, path: str | Path) -> Any:
        """
        Load a file of any recognised file type by this loader from the given ``path``.

        :param path: The path of the file to load.
        :raise ParserError: If the file type is not recognised.
        """
        match (path := Path(path)).suffix.casefold():
            case ".json":
                return cls._load_json(path)
            case suffix if suffix in (".yml", ".yaml"):
                return cls._load_yaml(path)
            case _:
                raise ParserError("Unrecognised file type", value=path)

    @staticmethod
    @contextmanager
    def _load_stream(path: str | Path) -> Iterator[TextIOWrapper]:
        with Path(path).open("r", encoding="utf-8") as stream:
            yield stream

    @classmethod
    def _load_yaml(cls, path: str | Path) -> Any:
        with cls._load_stream(path) as stream:
            return yaml.load(stream, cls)

    @classmethod
    def _load_json(cls, path: str | Path) -> Any:
        with cls._load_stream(path) as stream:
            return json.load(stream, object_hook=partial(cls._merge_includes, parent_path=Path(path).parent))

    @classmethod
    def _merge_includes(cls, mapping: dict[str, Any], parent_path: Path) -> dict[str, Any]:
        """
        Merge the content of any files referenced by the include key into the given ``mapping``.
        Values already in ``mapping`` take precedence. Include paths which do not exist are skipped.

        :param mapping: The mapping to merge into. The include key is removed from this mapping.
        :param parent_path: The directory relative include paths are resolved against.
        :raise ParserError: If an included file does not contain a mapping.
        """
        if cls.include_key not in mapping:
            return mapping

        for path in map(Path, to_collection(mapping.pop(cls.include_key))):
            if not path.is_absolute():
                path = parent_path.joinpath(path)
            if not path.is_file():
                continue

            include = cls.load(path)
            if not isinstance(include, Mapping):
                raise ParserError(f"Loaded file at {path=} is not a mapping", value=include)
            merge_maps(mapping, include, extend=False, overwrite=False)

        return mapping

    def __init__(self, stream: Any):
        super().__init__(stream)
        try:
            self._parent_path = Path(stream.name).parent
        except AttributeError:
            self._parent_path = Path.cwd()

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = True):
        """Construct the mapping, merging in the content of any included files"""
        mapping = super().construct_mapping(node, deep=deep)
        return self._merge_includes(mapping, parent_path=self._parent_path)
