"""Runtime configuration for the Codeforces problem proxy."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

# Tags offered by Codeforces, as listed on the problemset page
_CODEFORCES_TAG_TABLE = [
    "dp", "greedy", "math", "geometry", "string",
    "data structures", "trees", "graphs", "sorting", "binary search",
    "hashing", "bitmasks", "dp", "trees", "graphs", "sorting",
    "binary search", "hashing", "bitmasks",
]

AVAILABLE_TAGS: tuple[str, ...] = tuple(dict.fromkeys(_CODEFORCES_TAG_TABLE))


@dataclass(frozen=True)
class Settings:
    host: str = field(default_factory=lambda: os.getenv("CFPROXY_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("CFPROXY_PORT", "49160")))
    api_base_url: str = field(
        default_factory=lambda: os.getenv("CODEFORCES_API_URL", "https://codeforces.com/api/")
    )
    write_timeout: float = field(
        default_factory=lambda: float(os.getenv("CFPROXY_WRITE_TIMEOUT", "10"))
    )
    idle_timeout: int = field(
        default_factory=lambda: int(os.getenv("CFPROXY_IDLE_TIMEOUT", "60"))
    )
    grace_period: float = field(
        default_factory=lambda: float(os.getenv("CFPROXY_GRACE_PERIOD", "10"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    available_tags: tuple[str, ...] = AVAILABLE_TAGS

    @property
    def upstream_timeout(self) -> float:
        # The outbound call is only bounded by how long we may take to answer
        return self.write_timeout


def get_settings() -> Settings:
    return Settings()
