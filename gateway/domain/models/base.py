from pydantic import BaseModel, ConfigDict


class DomainRecord(BaseModel):
    """Base for immutable value objects built from provider payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
