"""Lifecycle of the `manifest` resource.

Slack's manifest API is asymmetric: create returns credentials and an OAuth
authorize URL exactly once, export returns only the manifest, and update
and delete return nothing. ManifestResource folds those responses into a
stable ManifestRecord.
"""

import dataclasses
import logging

from slack_app.api.abc import SlackAppApi
from slack_app.api.errors import SlackAppError
from slack_app.non_ideal_state import ClientError
from slack_app.resources.compare import canonical_manifest, manifests_equal
from slack_app.resources.types import (
    MANIFEST_KIND,
    Credentials,
    ManifestRecord,
    ResourceRemoved,
)

logger = logging.getLogger(__name__)


class ManifestResource:
    """Create, read, update, delete and import Slack app manifests.

    Every operation issues at most one API call and returns either a new
    record or a ClientError. The record passed in is never modified.
    """

    def __init__(self, api: SlackAppApi) -> None:
        self._api = api

    def create(self, manifest: str) -> ManifestRecord | ClientError:
        """Create a new app from `manifest`.

        The record keeps the submitted manifest string, not an echo from
        Slack, plus the credentials and authorize URL that Slack only
        returns here.
        """
        try:
            response = self._api.create_manifest(manifest)
        except SlackAppError as e:
            return ClientError(action="create manifest", error=e)

        logger.debug("created manifest for app %s", response.app_id)
        return ManifestRecord(
            id=response.app_id,
            manifest=manifest,
            credentials=Credentials(
                client_id=response.credentials.client_id,
                client_secret=response.credentials.client_secret,
                verification_token=response.credentials.verification_token,
                signing_secret=response.credentials.signing_secret,
            ),
            oauth_authorize_url=response.oauth_authorize_url,
        )

    def read(self, record: ManifestRecord) -> ManifestRecord | ClientError:
        """Refresh the manifest from Slack's export.

        When the stored manifest is structurally equal to the export, the
        stored string is kept as-is so formatting differences never show up
        as drift. Otherwise the canonical form of the export replaces it.
        Credentials and the authorize URL are left untouched.

        An app deleted outside this tool is not detected here: the export
        fails and the failure is returned like any other.
        """
        try:
            response = self._api.export_manifest(record.id)
        except SlackAppError as e:
            return ClientError(action="read manifest", error=e)

        exported = canonical_manifest(response.manifest)
        if manifests_equal(record.manifest, exported):
            return record

        logger.debug("manifest for app %s changed remotely", record.id)
        return dataclasses.replace(record, manifest=exported)

    def update(self, record: ManifestRecord, manifest: str) -> ManifestRecord | ClientError:
        """Replace the app's manifest wholesale.

        Slack returns no credentials on update. Values known from a prior
        create are carried over; values that were unknown (imported apps)
        stay explicitly None.
        """
        try:
            self._api.update_manifest(record.id, manifest)
        except SlackAppError as e:
            return ClientError(action="update manifest", error=e)

        logger.debug("updated manifest for app %s", record.id)
        return dataclasses.replace(record, manifest=manifest)

    def delete(self, record: ManifestRecord) -> ResourceRemoved | ClientError:
        """Permanently delete the app. On success the record must be dropped."""
        try:
            self._api.delete_manifest(record.id)
        except SlackAppError as e:
            return ClientError(action="delete manifest", error=e)

        logger.debug("deleted app %s", record.id)
        return ResourceRemoved(kind=MANIFEST_KIND, id=record.id)

    def import_state(self, app_id: str) -> ManifestRecord:
        """Start tracking an existing app by ID.

        Only the ID is known; follow with read() to fill in the manifest.
        Credentials and the authorize URL are never available for imports.
        """
        return ManifestRecord(id=app_id, manifest=None, credentials=None, oauth_authorize_url=None)
