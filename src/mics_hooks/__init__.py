"""
mics_hooks – Signed hook / queue-event SDK for tenant callback services.

Import path convention::

    from mics_hooks.application.signing import HookSigner, MqEventSigner
    from mics_hooks.application.events import try_verify_and_decode
    from mics_hooks.application.dispatch import HookDispatcher, HookHandlers, HookKind
    from mics_hooks.adapters.fastapi import create_hook_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
