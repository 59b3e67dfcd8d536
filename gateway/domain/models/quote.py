from gateway.domain.models.base import DomainRecord

DEFAULT_CATEGORY = "general"


class Quote(DomainRecord):
    """A quotation; ``category`` is the first provider tag, or "general"."""

    text: str
    author: str
    category: str = DEFAULT_CATEGORY
