"""Runtime configuration for the :mod:`pdfpagex` operations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ABORT_ENV_VAR = "PDFPAGEX_ABORT_ON_PERSIST_FAILURE"
PASSWORD_ENV_VAR = "PDFPAGEX_PASSWORD"
_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class OperationConfig:
    """Options shared by every operation of a :class:`PageOperations` instance.

    Attributes:
        abort_on_persist_failure: When ``True`` a failed output write aborts the
            whole operation. When ``False`` the failure is logged and the
            in-memory result is still returned.
        split_filename_template: File name used for each page written by
            :func:`pdfpagex.split_pdf`; ``{number}`` is the one-based page number.
        password: Password used to open encrypted inputs. The empty password is
            tried when unset.
    """

    abort_on_persist_failure: bool = True
    split_filename_template: str = "page_{number}.pdf"
    password: Optional[str] = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "OperationConfig":
        """Build a configuration from ``PDFPAGEX_*`` environment variables."""

        env = os.environ if env is None else env
        return cls(
            abort_on_persist_failure=_env_flag(env, ABORT_ENV_VAR, True),
            password=env.get(PASSWORD_ENV_VAR) or None,
        )

    def split_filename(self, page_number: int) -> str:
        return self.split_filename_template.format(number=page_number)


__all__ = ["OperationConfig", "ABORT_ENV_VAR", "PASSWORD_ENV_VAR"]
