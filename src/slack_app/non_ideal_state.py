"""Non-ideal states returned in place of a result.

Resource operations return `Result | NonIdealState` discriminated unions
rather than raising. Callers narrow with `isinstance` (see
`slack_app.cli.ensure_ideal.EnsureIdeal`).
"""

from dataclasses import dataclass

from slack_app.api.errors import SlackAppError


class NonIdealState:
    """Marker base for non-ideal results.

    Subclasses expose a human-readable `message` and a stable
    kebab-case `error_type`.
    """

    @property
    def message(self) -> str:
        raise NotImplementedError

    @property
    def error_type(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class ClientError(NonIdealState):
    """An API call failed. Implements NonIdealState.

    Attributes:
        action: What was being attempted (e.g., "create manifest")
        error: The SlackAppError raised by the API gateway, unchanged
    """

    action: str
    error: SlackAppError

    @property
    def summary(self) -> str:
        return "Client Error"

    @property
    def message(self) -> str:
        return f"Unable to {self.action}, got error: {self.error}"

    @property
    def error_type(self) -> str:
        return "client-error"


@dataclass(frozen=True)
class UnsupportedOperation(NonIdealState):
    """The operation is structurally disallowed for this resource kind."""

    detail: str

    @property
    def message(self) -> str:
        return self.detail

    @property
    def error_type(self) -> str:
        return "unsupported-operation"


@dataclass(frozen=True)
class ResourceNotFound(NonIdealState):
    """No state exists for the addressed resource."""

    kind: str
    name: str

    @property
    def message(self) -> str:
        return f"No {self.kind} named '{self.name}' in state"

    @property
    def error_type(self) -> str:
        return "resource-not-found"
