"""Persisted resource state.

Import from submodules:
- abc: StateStore, StateEntry
- sqlite: SQLiteStateStore
- fake: FakeStateStore
"""
