from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EbayModel(BaseModel):
    """eBay payloads are camelCase and grow new fields without notice; keep unknown ones."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")
