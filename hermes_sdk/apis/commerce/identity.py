from hermes_sdk.apis.base import BaseApi
from hermes_sdk.schemas.identity import UserResponse


class IdentityApi(BaseApi):
    """Commerce Identity API. Needs a user access token (EbayConfig.oauth_token)."""

    base_path = "/commerce/identity/v1"
    host = "apiz"

    async def get_user(self) -> UserResponse:
        return await self._call("GET", self._path("user") + "/", response_model=UserResponse)
