"""Slack App manifest API gateway.

Import from submodules:
- abc: SlackAppApi
- real: RealSlackAppApi
- fake: FakeSlackAppApi
- types: typed per-operation responses
- errors: SlackAppError and its subclasses
"""
