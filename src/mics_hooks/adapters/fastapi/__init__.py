"""FastAPI adapter – hook routes over HTTP."""
from mics_hooks.adapters.fastapi.routes import ACCEPTED_MEDIA_TYPES, create_hook_app, create_hook_router

__all__ = ["ACCEPTED_MEDIA_TYPES", "create_hook_app", "create_hook_router"]
