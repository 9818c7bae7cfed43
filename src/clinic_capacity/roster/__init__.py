"""
Provider roster and shift assignments.

The capacity projection only reads from this package. All edits
(lock/unlock, deletion, moving a provider between slots) happen here,
before the projection is run.
"""
