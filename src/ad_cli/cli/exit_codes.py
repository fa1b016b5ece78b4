"""Process exit codes shared by every action."""

EXIT_OK = 0
EXIT_FAILURE = 1  # one or more targets failed after validation passed
EXIT_USAGE = 2  # bad flag, unknown action or module, conflicting options
