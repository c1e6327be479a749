"""Order service layer (Use Cases).

Places an order for a customer against the product catalog: checks the
customer, resolves the requested products, runs the stock gates, prices
each line from the catalog snapshot and writes the new stock levels back.

The gates run in a fixed order and the first failure wins:

1. customer exists                       -> ``CustomerNotFound``
2. at least one product matched          -> ``NoProductsFound``
3. every requested id matched            -> ``ProductsNotFound``
4. no matched product has zero stock     -> ``ProductsSoldOut``
5. stock covers each requested quantity  -> ``InsufficientStock``

Order creation and the stock write-back are two sequential collaborator
calls with no transaction spanning them, and nothing here guards
against concurrent placements on the same product.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

import structlog

from modules.orders.dtos import CreateOrderData, ResolvedLineItemDTO
from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderNotFound,
    ProductsNotFound,
    ProductsSoldOut,
)
from modules.products.dtos import ProductQuantityDTO

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import PlaceOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

Catalog = Dict[str, "Product"]


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def place_order(self, dto: PlaceOrderDTO) -> Order:
        """Validate the request, create the order and decrement stock.

        Raises:
            CustomerNotFound: the customer id does not resolve.
            NoProductsFound: none of the requested ids matched the catalog.
            ProductsNotFound: some requested ids did not match.
            ProductsSoldOut: a matched product has zero stock.
            InsufficientStock: a matched product has less stock than requested.
        """
        log = logger.bind(customer_id=dto.customer_id, item_count=len(dto.items))
        log.info("order.placement_started")

        customer = await self._customer_repo.find_by_id(dto.customer_id)
        if customer is None:
            log.warning("order.customer_not_found")
            raise CustomerNotFound()

        found_products = await self._product_repo.find_all_by_id(dto.items)
        if not found_products:
            log.warning("order.no_products_found")
            raise NoProductsFound()

        catalog: Catalog = {str(product.id): product for product in found_products}

        missing_ids = [item.id for item in dto.items if item.id not in catalog]
        if missing_ids:
            log.warning("order.products_not_found", missing_ids=missing_ids)
            raise ProductsNotFound(missing_ids)

        sold_out_ids = [str(p.id) for p in found_products if p.quantity == 0]
        if sold_out_ids:
            log.warning("order.products_sold_out", product_ids=sold_out_ids)
            raise ProductsSoldOut(sold_out_ids)

        short_entries = self._insufficient_stock(found_products, dto.items)
        if short_entries:
            log.warning("order.insufficient_stock", entries=short_entries)
            raise InsufficientStock(short_entries)

        line_items, stock_adjustments = self._resolve(dto.items, catalog)

        order = await self._order_repo.create(
            CreateOrderData(customer=customer, items=line_items)
        )
        await self._product_repo.update_quantity(stock_adjustments)

        log.info("order.placed", order_id=str(order.id))
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    # ------------------------------------------------------------------
    # Gates & resolution
    # ------------------------------------------------------------------

    @staticmethod
    def _insufficient_stock(
        found_products: Sequence[Product], items: Sequence[ProductQuantityDTO]
    ) -> List[str]:
        """Return ``"id: available"`` for every product short of stock.

        Each product is compared with the first request line carrying its
        id; a product with no such line passes.
        """
        entries = []
        for product in found_products:
            product_id = str(product.id)
            requested = next((i for i in items if i.id == product_id), None)
            if requested is None:
                continue
            if product.quantity < requested.quantity:
                entries.append(f"{product_id}: {product.quantity}")
        return entries

    @staticmethod
    def _find_product(catalog: Catalog, product_id: str) -> Optional[Product]:
        return catalog.get(product_id)

    def _resolve(
        self, items: Sequence[ProductQuantityDTO], catalog: Catalog
    ) -> Tuple[List[ResolvedLineItemDTO], List[ProductQuantityDTO]]:
        """Price every request line and compute its post-sale stock level.

        Lines are processed in request order without merging duplicates.
        Every stock level is computed from the snapshot returned by the
        catalog look-up, so two lines for the same product do not add up.
        """
        line_items: List[ResolvedLineItemDTO] = []
        stock_adjustments: List[ProductQuantityDTO] = []

        for item in items:
            product = self._find_product(catalog, item.id)
            # Unreachable once the gates have passed; zero is the fallback.
            if product is None:
                price, available = Decimal("0.00"), 0
            else:
                price, available = product.price, product.quantity

            line_items.append(
                ResolvedLineItemDTO(
                    product_id=item.id, quantity=item.quantity, unit_price=price
                )
            )
            stock_adjustments.append(
                ProductQuantityDTO(id=item.id, quantity=available - item.quantity)
            )

        return line_items, stock_adjustments
