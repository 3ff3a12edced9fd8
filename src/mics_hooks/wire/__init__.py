"""Wire – protobuf encoding of the hook / queue contracts."""
from mics_hooks.wire.codec import decode, encode, from_message, to_message

PROTOBUF_MEDIA_TYPE = "application/protobuf"

__all__ = ["PROTOBUF_MEDIA_TYPE", "decode", "encode", "from_message", "to_message"]
