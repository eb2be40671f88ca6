"""
Stores all config objects for the program.

A config object stores the values from which an assembly info file is generated,
along with the runtime configuration needed to generate it e.g. output path, logging etc.

Config objects are validated on creation and are never modified by the objects which consume them.
"""
