from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .client import RestClient
from .hooks import ClientHooks, logging_hooks
from .transport import UrllibTransport


class ClientSettings(BaseModel):
    """Connection settings for a ``RestClient``; values are resolved by the caller."""

    base_url: str
    timeout: float = Field(default=30.0, gt=0)
    user_agent: Optional[str] = "rest-core/0.1"
    default_headers: Dict[str, str] = Field(default_factory=dict)
    log_calls: bool = True

    def build_client(
        self,
        *,
        hooks: Optional[ClientHooks] = None,
        logger: Optional[logging.Logger] = None,
    ) -> RestClient:
        if hooks is None and self.log_calls:
            hooks = logging_hooks(logger)
        return RestClient(
            self.base_url,
            transport=UrllibTransport(timeout=self.timeout, user_agent=self.user_agent, logger=logger),
            hooks=hooks,
            default_headers=self.default_headers,
            logger=logger,
        )
