"""CLI error handling for non-ideal-state type narrowing.

This module provides the EnsureIdeal class for narrowing discriminated
unions returned by resource operations. Non-ideal cases print a red
`Error:` line to stderr and exit with status 1.
"""

from typing import TypeVar

import click

from slack_app.non_ideal_state import ClientError, NonIdealState, ResourceNotFound
from slack_app.output import user_output

T = TypeVar("T")


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        Args:
            result: Value that may be a NonIdealState

        Returns:
            The value unchanged if not NonIdealState (with narrowed type T)

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)

        Example:
            >>> record = EnsureIdeal.ideal_state(ctx.manifests.create(manifest))
            >>> # record is now a ManifestRecord, not ManifestRecord | ClientError
        """
        if isinstance(result, ClientError):
            user_output(click.style(f"{result.summary}: ", fg="red") + result.message)
            raise SystemExit(1)
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result

    @staticmethod
    def tracked(record: T | None, *, kind: str, name: str) -> T:
        """Ensure a state lookup found a record.

        Args:
            record: Result of a StateStore get_* call
            kind: Resource kind, for the error message
            name: Resource name, for the error message

        Returns:
            The record

        Raises:
            SystemExit: If record is None (with exit code 1)
        """
        if record is None:
            not_found = ResourceNotFound(kind=kind, name=name)
            user_output(click.style("Error: ", fg="red") + not_found.message)
            raise SystemExit(1)
        return record
