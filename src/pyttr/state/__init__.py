"""State/store layer.

This package owns the current snapshot of each feed. It is the only place
a snapshot is replaced and the only recovery boundary for refresh failures.
"""
