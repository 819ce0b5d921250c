"""API credential models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Consumer credentials issued by the FatSecret Platform."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
