"""
Standardized exit codes for the Retrolambda CLI.

Scripts and build tool integrations rely on these codes to tell a
misconfigured invocation apart from other failures.
"""

from typing import Optional

import typer


# Exit code constants
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2


class CliExit(typer.Exit):
    """
    Standardized CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.success()  # Success
        raise CliExit.config_error("Missing required property")
    """

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Initialize CLI exit.

        Args:
            code: Exit code (EXIT_SUCCESS or EXIT_CONFIG_ERROR)
            message: Optional message to display before exiting
        """
        self.message = message
        super().__init__(code)
        if message:
            print(message)

    @classmethod
    def success(cls, message: Optional[str] = None) -> "CliExit":
        """Create a success exit."""
        return cls(EXIT_SUCCESS, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)
