"""Kernel contracts – HookMeta envelope metadata."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class HookMeta:
    """Metadata carried by every hook request / response pair.

    ``signature`` travels as the ``sign`` wire field. It is never part of the
    signed bytes: signers always work on :meth:`cleared` copies.
    """

    tenant_id: str = ""
    request_id: str = ""
    timestamp_ms: int = 0
    signature: str = ""
    trace_id: str = ""

    def cleared(self) -> HookMeta:
        """Return a copy with ``signature`` emptied."""
        if not self.signature:
            return self
        return dataclasses.replace(self, signature="")

    def echo(self) -> HookMeta:
        """Return the metadata to echo on a response (signature as received)."""
        return HookMeta(
            tenant_id=self.tenant_id,
            request_id=self.request_id,
            timestamp_ms=self.timestamp_ms,
            signature=self.signature,
            trace_id=self.trace_id,
        )


__all__ = ["HookMeta"]
