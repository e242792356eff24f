"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services orchestrate IO (HTTP, persistence) around core/ decisions
    - Collaborators (repository, transport, notifier) are injected, never global
"""
