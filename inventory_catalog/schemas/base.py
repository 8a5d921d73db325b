"""Shared schema base: camelCase on the wire, snake_case in Python."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys (companyName, canAdd...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_storage(self) -> dict:
        """Dump to the JSON shape kept in the slot store."""
        return self.model_dump(mode="json", by_alias=True)
