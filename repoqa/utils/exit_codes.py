"""Centralized exit codes for the repoqa CLI."""


class ExitCodes:
    """Standard exit codes for repoqa commands."""

    SUCCESS = 0

    FAILURE = 1

    # click.UsageError exits with 2
    USAGE = 2
