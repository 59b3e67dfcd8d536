from typing import List, Optional

from gateway.domain.models.base import DomainRecord


class Character(DomainRecord):
    """A character from the Dragon Ball API, with nested objects flattened to names."""

    id: int
    name: str
    ki: Optional[str] = None
    max_ki: Optional[str] = None
    race: Optional[str] = None
    gender: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    affiliation: Optional[str] = None
    origin_planet: Optional[str] = None
    transformations: List[str] = []
