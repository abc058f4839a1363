"""Constants used throughout the application."""

# Program identity
PROG_NAME = "ram-utils"

# Click context settings shared by every command
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Version flags (matches the -V/--version surface of the original tool)
VERSION_FLAGS = ("-V", "--version")

# Path components that never get renamed
UNRENAMEABLE_NAMES = frozenset({"", ".", ".."})

# Default directory for the extension report
DEFAULT_EXTENSIONS_PATH = "."

# Exit code used when no subcommand is given
EXIT_USAGE = 2
