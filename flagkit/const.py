VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "A minimal command-line flag parser with typed destination slots"
ARGV0 = "flagkit"

PREFIX = "-"
SEPARATOR = "="

HELP_LONG = "help"
HELP_SHORT = "h"
RESERVED = (HELP_SHORT, HELP_LONG)

TRUE_VALUES = ("true", "True", "y", "yes", "Y", "Yes", "1")
FALSE_VALUES = ("false", "False", "n", "no", "N", "No", "0")
