"""Mapping engine hand-off.

The relational-to-graph mapping engine is external; this package defines
the protocol it must satisfy, how a factory for it is resolved, and the
single guarded invocation the orchestrator performs per request.
"""
