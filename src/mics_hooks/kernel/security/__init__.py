"""Kernel security – canonical signature encoding and the MAC engine."""
from mics_hooks.kernel.security.canonical import decode_canonical, encode_canonical, is_canonical
from mics_hooks.kernel.security.mac import DIGEST_SIZE, hmac_sha256

__all__ = [
    "DIGEST_SIZE",
    "decode_canonical",
    "encode_canonical",
    "hmac_sha256",
    "is_canonical",
]
