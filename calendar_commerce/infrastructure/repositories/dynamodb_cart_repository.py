"""DynamoDB cart repository."""
import logging
import os
from contextlib import AbstractContextManager, nullcontext
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from calendar_commerce.domain.entities import Cart, CartItem
from calendar_commerce.domain.exceptions import ConcurrentCartModificationError
from calendar_commerce.domain.identifiers import CartId, ItemId, SessionId
from calendar_commerce.domain.ports import CartRepository
from calendar_commerce.domain.value_objects import Money

logger = logging.getLogger(__name__)

# TTL: 30 days since the last save
TTL_DAYS = 30


class DynamoDBCartRepository(CartRepository):
    """DynamoDB cart repository.

    The table is keyed by session_id, so a session can never own two carts.
    Saves are guarded by the cart's version; a lost race raises
    ConcurrentCartModificationError instead of overwriting.
    """

    def __init__(self, table_name: str | None = None) -> None:
        """Initialize."""
        self._table_name = table_name or os.environ.get(
            "CART_TABLE_NAME", "calendar-commerce-cart"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, cart: Cart) -> None:
        """Save the cart if nobody saved it since it was loaded."""
        item = self._to_dynamodb_item(cart, version=cart.version + 1)
        if cart.version == 0:
            condition = Attr("session_id").not_exists()
        else:
            condition = Attr("version").eq(cart.version)

        try:
            self._table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                logger.warning(
                    "Concurrent modification of cart %s (session %s)",
                    cart.cart_id, cart.session_id,
                )
                raise ConcurrentCartModificationError(cart.session_id.value) from e
            raise
        cart.version += 1

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """Find a cart by id (GSI)."""
        response = self._table.query(
            IndexName="cart_id-index",
            KeyConditionExpression=Key("cart_id").eq(cart_id.value),
            Limit=1,
        )
        items = response["Items"]
        if not items:
            return None
        return self._from_dynamodb_item(items[0])

    def find_by_session_id(self, session_id: SessionId) -> Cart | None:
        """Find the cart owned by a session."""
        response = self._table.get_item(Key={"session_id": session_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_or_create_for_session(self, session_id: SessionId) -> Cart:
        """Return the session's cart, creating one if needed."""
        cart = self.find_by_session_id(session_id)
        if cart is not None:
            return cart

        cart = Cart.create(session_id)
        try:
            self.save(cart)
        except ConcurrentCartModificationError:
            # another request created it first; use theirs
            existing = self.find_by_session_id(session_id)
            if existing is None:
                raise
            return existing
        logger.info("Created cart %s for session %s", cart.cart_id, session_id)
        return cart

    def find_item_by_id(self, item_id: ItemId) -> CartItem | None:
        """Find an item in any cart (paginated scan)."""
        kwargs: dict[str, Any] = {
            "FilterExpression": Attr("item_ids").contains(item_id.value),
        }
        while True:
            response = self._table.scan(**kwargs)
            for record in response.get("Items", []):
                item = self._from_dynamodb_item(record).get_item(item_id)
                if item is not None:
                    return item
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return None
            kwargs["ExclusiveStartKey"] = last_key

    def delete(self, cart_id: CartId) -> None:
        """Delete a cart."""
        cart = self.find_by_id(cart_id)
        if cart is None:
            return
        self._table.delete_item(Key={"session_id": cart.session_id.value})

    def session_lock(self, session_id: SessionId) -> AbstractContextManager:
        """No process-local lock; save() enforces the version check."""
        return nullcontext()

    def _to_dynamodb_item(self, cart: Cart, version: int) -> dict[str, Any]:
        """Convert a Cart entity to a DynamoDB item."""
        ttl = int((datetime.now(timezone.utc) + timedelta(days=TTL_DAYS)).timestamp())

        items = []
        for item in cart.get_items():
            items.append(
                {
                    "item_id": item.item_id.value,
                    "product_code": item.product_code,
                    "template_id": item.template_id,
                    "display_name": item.display_name,
                    "year": item.year,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price.value,
                    "configuration": item.configuration,
                    "generator_type": item.generator_type,
                    "added_at": item.added_at.isoformat(),
                }
            )

        return {
            "session_id": cart.session_id.value,
            "cart_id": cart.cart_id.value,
            "items": items,
            "item_ids": [item.item_id.value for item in cart.get_items()],
            "version": version,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "ttl": ttl,
        }

    def _from_dynamodb_item(self, item: dict[str, Any]) -> Cart:
        """Convert a DynamoDB item to a Cart entity."""
        cart_id = CartId(item["cart_id"])

        cart_items = []
        for item_data in item.get("items", []):
            year = item_data.get("year")
            cart_items.append(
                CartItem(
                    item_id=ItemId(item_data["item_id"]),
                    cart_id=cart_id,
                    product_code=item_data["product_code"],
                    template_id=item_data.get("template_id"),
                    display_name=item_data["display_name"],
                    year=self._to_int(year) if year is not None else None,
                    quantity=self._to_int(item_data["quantity"]),
                    unit_price=Money(Decimal(str(item_data["unit_price"]))),
                    configuration=item_data.get("configuration"),
                    generator_type=item_data.get("generator_type"),
                    added_at=datetime.fromisoformat(item_data["added_at"]),
                )
            )

        return Cart(
            cart_id=cart_id,
            session_id=SessionId(item["session_id"]),
            _items=cart_items,
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            version=self._to_int(item.get("version", 0)),
        )

    @staticmethod
    def _to_int(value: Any) -> int:
        """Convert a DynamoDB Decimal to int."""
        return int(value)
