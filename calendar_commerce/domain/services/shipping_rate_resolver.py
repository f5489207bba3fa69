"""Shipping rate domain service."""
import logging
from typing import Any, Mapping

from ..enums import ShippingTier
from ..exceptions import InvalidArgumentError, PolicyRejectedError
from ..value_objects import Money, ShippingOption, ShippingQuote, ShippingRateTable

logger = logging.getLogger(__name__)

DOMESTIC_COUNTRY_CODE = "US"

# Destinations we plan to serve; they get a friendlier rejection message.
_COMING_SOON = {
    "CA": "Canada",
    "MX": "Mexico",
}


class ShippingRateResolver:
    """Computes the shipping charge for a destination address.

    Only domestic (US) destinations are fulfillable. Every other country is a
    policy rejection, not a validation error. Only the STANDARD tier is wired
    into resolve(); the remaining tiers are priced for list_options() and the
    INTERNATIONAL rate has no selection logic yet.
    """

    def __init__(self, rate_table: ShippingRateTable | None = None) -> None:
        """Initialize.

        Args:
            rate_table: Rates per tier (built-in defaults when omitted)
        """
        self._rate_table = rate_table or ShippingRateTable.default()

    @property
    def rate_table(self) -> ShippingRateTable:
        return self._rate_table

    def resolve(self, address: Mapping[str, Any] | None) -> Money:
        """Return the shipping charge for an address.

        Args:
            address: Destination with at least a "country" field

        Returns:
            Standard domestic rate

        Raises:
            InvalidArgumentError: address or country missing or blank
            PolicyRejectedError: destination outside the US
        """
        return self.quote(address).amount

    def quote(self, address: Mapping[str, Any] | None) -> ShippingQuote:
        """Same rules as resolve(), keeping the normalized country and tier."""
        country = self.normalize_country(address)
        if country != DOMESTIC_COUNTRY_CODE:
            logger.error("International shipping requested (country: %s) - not supported", country)
            raise PolicyRejectedError(
                f"international shipping to {country} is not supported; "
                "only domestic addresses are accepted",
                country=country,
            )

        amount = self._rate_table.rate_for(ShippingTier.STANDARD)
        logger.debug("Domestic rate: %s", amount)
        return ShippingQuote(country=country, tier=ShippingTier.STANDARD, amount=amount)

    def list_options(self, address: Mapping[str, Any] | None) -> list[ShippingOption]:
        """Selectable delivery speeds for an address.

        Raises:
            InvalidArgumentError: address or country missing or blank
            PolicyRejectedError: destination outside the US
        """
        country = self.normalize_country(address)
        if country != DOMESTIC_COUNTRY_CODE:
            if country in _COMING_SOON:
                message = (
                    f"Shipping to {_COMING_SOON[country]} is coming soon. "
                    "Please check back later."
                )
            else:
                message = "We currently only ship within the United States."
            logger.error("No shipping options for country %s", country)
            raise PolicyRejectedError(message, country=country)

        return [
            ShippingOption(tier=tier, amount=self._rate_table.rate_for(tier))
            for tier in ShippingTier.domestic_tiers()
        ]

    @staticmethod
    def normalize_country(address: Mapping[str, Any] | None) -> str:
        """Validate the address and return its trimmed, upper-cased country code."""
        if address is None:
            logger.error("Shipping address is missing")
            raise InvalidArgumentError("address required")

        raw_country = address.get("country")
        if raw_country is None:
            logger.error("Shipping address missing country field")
            raise InvalidArgumentError("country required")

        country = str(raw_country).strip().upper()
        if not country:
            logger.error("Country code is empty")
            raise InvalidArgumentError("country cannot be empty")

        logger.debug("Normalized shipping country: %s", country)
        return country
