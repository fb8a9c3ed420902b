"""Lifecycle of the `token` resource.

Tokens can only be imported. Rotation and expiry checks are not implemented,
so read and update hand the record back unchanged and delete only drops the
local record.
"""

from slack_app.api.abc import SlackAppApi
from slack_app.non_ideal_state import UnsupportedOperation
from slack_app.resources.types import TOKEN_KIND, ResourceRemoved, TokenRecord


class TokenResource:
    """Import-only app configuration token pair.

    Holds the session's shared API gateway, which rotation will call.
    """

    def __init__(self, api: SlackAppApi) -> None:
        self._api = api

    def create(self) -> UnsupportedOperation:
        return UnsupportedOperation(detail="Tokens cannot be created, only imported.")

    def read(self, record: TokenRecord) -> TokenRecord:
        # TODO: flag tokens that are close to expiry and need rotating
        return record

    def update(self, record: TokenRecord) -> TokenRecord:
        # TODO: rotate via tooling.tokens.rotate using refresh_token
        return record

    def delete(self, record: TokenRecord) -> ResourceRemoved:
        return ResourceRemoved(kind=TOKEN_KIND, id=record.id)

    def import_state(self, refresh_token: str) -> TokenRecord:
        """Start tracking a token pair from its refresh token.

        The token ID and access token stay unknown until rotation exists.
        """
        return TokenRecord(id=None, token=None, refresh_token=refresh_token)
