import io
import logging
from collections.abc import Iterator
from pathlib import Path

from assemblyinfo_cli import PROGRAM_NAME
from assemblyinfo_cli.config.settings import AssemblyInfoSettings
from assemblyinfo_cli.creator._data import AssemblyInfoCreatorData
from assemblyinfo_cli.creator._filesystem import FileSystem, LocalFileSystem, Environment
from assemblyinfo_cli.exception import InvalidArgumentError, FileSystemError

HEADER_RULE = "//" + "-" * 78


class AssemblyInfoCreator:
    """
    Writes assembly info files from a given :py:class:`AssemblyInfoSettings`.

    :param file_system: Opens the output file for writing. Defaults to the local disk.
    :param environment: Resolves relative output paths. Defaults to the current working directory.
    :param tool_name: The name of the tool to credit in the header of generated files.
    :param newline: The line terminator to write.
    :param byte_order_mark: Write a UTF-8 byte order mark at the start of the file.
    """

    def __init__(
            self,
            file_system: FileSystem | None = None,
            environment: Environment | None = None,
            tool_name: str = PROGRAM_NAME,
            newline: str = "\n",
            byte_order_mark: bool = False,
    ):
        self.logger = logging.getLogger(__name__)

        self.file_system = file_system if file_system is not None else LocalFileSystem()
        self.environment = environment if environment is not None else Environment()
        self.tool_name = tool_name
        self.newline = newline
        self.byte_order_mark = byte_order_mark

    @property
    def encoding(self) -> str:
        """The text encoding to write files with"""
        return "utf-8-sig" if self.byte_order_mark else "utf-8"

    def create(self, output_path: str | Path | None, settings: AssemblyInfoSettings | None) -> Path:
        """
        Create an assembly info file at the given ``output_path`` from the given ``settings``,
        replacing any existing file.

        :param output_path: The path of the file to create. Relative paths are resolved against the environment.
        :param settings: The settings to generate the file from.
        :return: The absolute path of the created file.
        :raise InvalidArgumentError: When either argument is not given.
        :raise FileSystemError: When the file cannot be opened or written to.
        """
        if output_path is None:
            raise InvalidArgumentError(key="output_path")
        if settings is None:
            raise InvalidArgumentError(key="settings")

        data = AssemblyInfoCreatorData.from_settings(settings)

        path = self.environment.make_absolute(output_path)
        self.logger.debug(f"Creating assembly info file: {path}")

        try:
            with (
                self.file_system.open_write(path) as stream,
                io.TextIOWrapper(stream, encoding=self.encoding, newline=self.newline) as writer,
            ):
                for line in self.generate_lines(data):
                    writer.write(line + "\n")
        except OSError as ex:
            raise FileSystemError(f"Could not write assembly info file: {ex}", value=path) from ex

        return path

    def generate_lines(self, data: AssemblyInfoCreatorData) -> Iterator[str]:
        """Yields each line of the assembly info file for the given ``data`` without line terminators"""
        yield HEADER_RULE
        yield "// <auto-generated>"
        yield f"//     This code was generated by {self.tool_name}."
        yield "// </auto-generated>"
        yield HEADER_RULE

        if data.namespaces:
            for namespace in data.namespaces:
                yield f"using {namespace};"
            yield ""

        if data.attributes:
            for name, value in data.attributes.items():
                yield f"[assembly: {name}({value})]"
            yield ""

        if data.internal_visible_to:
            for grant in data.internal_visible_to:
                yield f"[assembly: {grant}]"
            yield ""
