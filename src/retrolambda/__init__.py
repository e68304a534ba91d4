"""
Retrolambda - configuration layer

Declares the system properties understood by Retrolambda, checks that a
supplied property set is complete, resolves typed settings from it and
renders the usage text shown when something is missing.

Package Structure:
- api: Property keys passed by build tools as -D properties
- core/config/: Parameter registry, resolver, validation and help text
- core/utils/: Logging helpers
- cli/: Command-line entry point

"""

__version__ = "2.5.7"
