"""Config settings – HookSettings for services receiving hooks and MQ events."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mics_hooks.config.settings.base import Settings
from mics_hooks.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class HookSettings(Settings):
    """Environment: ``MICS_HOOK_REQUIRE_SIGNATURE``, ``MICS_HOOK_TENANT_SECRETS_RAW``
    (``t1=s1,t2=s2``), ``MICS_HOOK_KAFKA_BOOTSTRAP_SERVERS``,
    ``MICS_HOOK_KAFKA_GROUP_ID``, ``MICS_HOOK_TENANT_IDS`` and
    ``MICS_HOOK_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = "MICS_HOOK"

    require_signature: bool = True
    tenant_secrets_raw: str = ""
    kafka_bootstrap_servers: str = "localhost:9092"
    kafka_group_id: str = "mics-hook"
    tenant_ids: list[str] = dataclasses.field(default_factory=list)
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        self.tenant_secrets()

    def tenant_secrets(self) -> dict[str, str]:
        """Parse ``tenant_secrets_raw`` into a ``tenant_id -> secret`` mapping."""
        secrets: dict[str, str] = {}
        for entry in self.tenant_secrets_raw.split(","):
            if not entry.strip():
                continue
            tenant_id, sep, secret = entry.partition("=")
            tenant_id = tenant_id.strip()
            if not sep or not tenant_id or not secret.strip():
                raise InvalidSettingValueError(
                    "tenant_secrets_raw", entry, "entries must look like tenant=secret"
                )
            secrets[tenant_id] = secret.strip()
        return secrets

    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def __repr__(self) -> str:
        return (
            f"HookSettings(require_signature={self.require_signature!r}, "
            f"tenant_secrets_raw='***', "
            f"kafka_bootstrap_servers={self.kafka_bootstrap_servers!r}, "
            f"kafka_group_id={self.kafka_group_id!r}, "
            f"tenant_ids={self.tenant_ids!r}, log_level={self.log_level!r})"
        )


__all__ = ["HookSettings"]
