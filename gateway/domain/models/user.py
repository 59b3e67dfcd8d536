from pydantic import Field

from gateway.domain.models.base import DomainRecord


class Geo(DomainRecord):
    lat: str
    lng: str


class Address(DomainRecord):
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(DomainRecord):
    name: str
    catch_phrase: str = Field(default="", serialization_alias="catchPhrase")
    bs: str = ""


class User(DomainRecord):
    """Directory entry. Serialized with the provider's own field names."""

    id: int
    name: str
    username: str
    email: str
    address: Address
    phone: str = ""
    website: str = ""
    company: Company


class Post(DomainRecord):
    user_id: int = Field(serialization_alias="userId")
    id: int
    title: str
    body: str
