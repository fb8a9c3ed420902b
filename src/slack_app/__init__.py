"""slack-app: Slack App manifests as declarative resources.

This package provides a Click-based CLI and a small resource layer for
creating, reading, updating and deleting Slack App manifests through the
Slack `apps.manifest.*` Web API. See `slack-app --help` for details.
"""
