from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from hermes_sdk.core.constants import IDEMPOTENT_METHODS


class RequestDescriptor(BaseModel):
    """One outgoing eBay REST call, built by a specialized client and consumed by the executor."""

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    path: str
    params: Dict[str, Any] = {}
    headers: Dict[str, str] = {}
    body: Optional[Any] = None      # JSON payload
    content: Optional[bytes] = None  # raw payload, wins over body
    host: Literal["api", "apiz", "apix"] = "api"
    # None -> decided by method (reads only)
    retry_safe: Optional[bool] = None

    @field_validator("method")
    @classmethod
    def _upper_method(cls, v: str) -> str:
        return v.upper()

    @field_validator("path")
    @classmethod
    def _leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else "/" + v

    @field_validator("params", mode="before")
    @classmethod
    def _drop_empty_params(cls, v: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if not v:
            return {}
        return {k: val for k, val in v.items() if val is not None}

    @field_validator("headers", mode="before")
    @classmethod
    def _drop_empty_headers(cls, v: Optional[Dict[str, Any]]) -> Dict[str, str]:
        if not v:
            return {}
        return {k: str(val) for k, val in v.items() if val is not None}

    @property
    def is_retry_safe(self) -> bool:
        if self.retry_safe is not None:
            return self.retry_safe
        return self.method in IDEMPOTENT_METHODS
