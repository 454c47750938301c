"""Query parameters for the settings and event endpoints."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

from vwo_fme.constants import SDK_NAME, SDK_VERSION


@dataclass
class SettingsQueryParams:
    """Query parameters of a settings request."""

    api_key: str = ""
    random: str = ""
    account_id: str = ""

    def as_dict(self) -> dict[str, str]:
        """Parameters under their wire names."""
        return {"i": self.api_key, "r": self.random, "a": self.account_id}


@dataclass
class RequestQueryParams:
    """Query parameters of an event request."""

    event_name: str = ""
    account_id: str = ""
    sdk_key: str = ""
    event_time: int = 0
    random: float = 0.0
    platform: str = "FS"
    visitor_user_agent: str = ""
    visitor_ip: str = ""
    sdk_name: str = SDK_NAME
    sdk_version: str = SDK_VERSION

    @classmethod
    def create(
        cls,
        event_name: str,
        account_id: str,
        sdk_key: str,
        visitor_user_agent: str,
        ip_address: str,
    ) -> RequestQueryParams:
        """Parameters for an event sent now, with a fresh random value."""
        return cls(
            event_name=event_name,
            account_id=account_id,
            sdk_key=sdk_key,
            event_time=time.time_ns() // 1_000_000,
            random=random.random(),
            visitor_user_agent=visitor_user_agent,
            visitor_ip=ip_address,
        )

    def as_dict(self) -> dict[str, str]:
        """Parameters under their wire names; visitor fields only when set."""
        params = {
            "en": self.event_name,
            "a": self.account_id,
            "env": self.sdk_key,
            "eTime": str(self.event_time),
            "random": f"{self.random:.16f}",
            "p": self.platform,
            "sn": self.sdk_name,
            "sv": self.sdk_version,
        }
        if self.visitor_user_agent:
            params["visitor_ua"] = self.visitor_user_agent
        if self.visitor_ip:
            params["visitor_ip"] = self.visitor_ip
        return params