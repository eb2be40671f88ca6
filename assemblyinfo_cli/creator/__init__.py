"""
The creator package turns validated settings into generated files,
handling both the derivation of what to write and the writing of it.

Settings are only ever read by this package; all derived data is created fresh for each file written.
"""
from ._data import AssemblyInfoCreatorData, AttributeDefinition, ATTRIBUTE_TABLE
from ._filesystem import FileSystem, LocalFileSystem, Environment
from ._creator import AssemblyInfoCreator
