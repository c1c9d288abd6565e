"""OpenCTI configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_float_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

OPENCTI_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class OpenCTIConfig:
    """Holds the OpenCTI connection values and the default write identity."""

    url: str
    token: str
    default_identity_name: str
    resilience: ResilienceConfig


def get_opencti_config(*, resilience: ResilienceConfig | None = None) -> OpenCTIConfig:
    values = require_env_vars(("OPENCTI_URL", "OPENCTI_TOKEN", "WEBTRUST_DEFAULT_IDENTITY"))
    url = values["OPENCTI_URL"].rstrip("/")
    token = values["OPENCTI_TOKEN"]
    timeout = optional_float_env_var("OPENCTI_TIMEOUT_SECONDS", OPENCTI_TIMEOUT_SECONDS)

    return OpenCTIConfig(
        url=url,
        token=token,
        default_identity_name=values["WEBTRUST_DEFAULT_IDENTITY"],
        resilience=resilience
        or ResilienceConfig(
            name="opencti",
            base_url=f"{url}/",
            timeout_seconds=timeout,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
            default_headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
        ),
    )
