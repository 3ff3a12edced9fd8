"""Application signing – request and queue-event signers."""
from mics_hooks.application.signing.event_signer import MqEventSigner
from mics_hooks.application.signing.keys import Secret
from mics_hooks.application.signing.request_signer import HookSigner

__all__ = ["HookSigner", "MqEventSigner", "Secret"]
