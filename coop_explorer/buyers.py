"""
Buyer -> country lookup.

Buyer country is not a cooperative attribute: it is resolved from the
buyer name. Buyers missing from the mapping never match a country filter.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Set

logger = logging.getLogger(__name__)


class UnresolvedBuyerCountry(LookupError):
    """No country is known for this buyer."""


BUYER_COUNTRY: Dict[str, str] = {
    "Belize Sea Co.": "Belize",
    "Blue Foods Ltd.": "Trinidad & Tobago",
    "BelSea Export": "Belize",
    "MarSea Intl": "Mexico",
    "Global Travel Partners": "United States",
    "BlueWave Capital": "United States",
    "CaribEco Partners": "Jamaica",
    "ChocoBel Exporters": "Belize",
    "SweetBel Imports": "Belize",
    "CaribBlue Ventures": "Barbados",
    "Atlantic Aqua Partners": "Costa Rica",
}


class BuyerDirectory:
    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        source = BUYER_COUNTRY if mapping is None else mapping
        self._mapping = {str(k): str(v) for k, v in source.items() if str(v).strip()}

    @classmethod
    def from_path(cls, path: Path) -> "BuyerDirectory":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{Path(path).name}: expected a buyer -> country object")
        logger.info("Loaded %d buyer countries from %s", len(data), path)
        return cls(data)

    def __contains__(self, buyer: object) -> bool:
        return buyer in self._mapping

    def country_for(self, buyer: str) -> str:
        try:
            return self._mapping[buyer]
        except KeyError:
            raise UnresolvedBuyerCountry(buyer) from None

    def matches(self, buyer: str, country: str) -> bool:
        """Fail-closed: an unknown buyer matches no country."""
        try:
            return self.country_for(buyer) == country
        except UnresolvedBuyerCountry:
            logger.debug("No country for buyer %r; treated as non-matching", buyer)
            return False

    def countries(self) -> Set[str]:
        return set(self._mapping.values())
