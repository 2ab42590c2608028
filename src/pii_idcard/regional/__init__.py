"""Identity card validators for Hong Kong, Macau and Taiwan."""

from pii_idcard.regional import hk, mo, tw

__all__ = ["hk", "mo", "tw"]
