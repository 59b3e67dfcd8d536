from gateway.domain.models.base import DomainRecord


class CryptoPrice(DomainRecord):
    """
    USD price for one cryptocurrency.

    The exchange-rate provider only offers a spot rate, so the 24h change,
    market cap and volume fields are always zero.
    """

    symbol: str
    name: str
    price: float
    change_24h: float = 0
    change_percentage_24h: float = 0
    market_cap: float = 0
    volume_24h: float = 0
    last_updated: str
