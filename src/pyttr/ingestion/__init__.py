"""Ingestion layer.

This package turns raw feed bodies into normalized snapshots:
decode (JSON -> wire models), normalize (wire models -> snapshots), and
the pipeline that chains them behind a transport.
"""

__all__: list[str] = []
