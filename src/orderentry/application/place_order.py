"""Application service: Place Order use case.

Validates a proposed order, hands it to the fulfillment system, prices
it for the customer's locale and notifies the customer.

Steps run strictly in sequence and the first failure ends the call:

  1. validate (all rule violations reported together)
  2. submit to fulfillment
  3. look up the customer
  4. fetch the customer's tax schedule
  5. compute the net total
  6. compute the gross total from the "Default" tax rate
  7. notify the customer
  8. return the summary

Nothing is retried and nothing is remembered between calls: placing the
same order twice submits and notifies twice.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from orderentry.application.dto import OrderSummary
from orderentry.domain.exceptions import (
    CustomerNotFoundError,
    FulfillmentError,
    MissingCustomerError,
    ValidationError,
)
from orderentry.domain.gateway.fulfillment_gateway import FulfillmentGateway
from orderentry.domain.gateway.inventory_gateway import InventoryGateway
from orderentry.domain.gateway.notifier import Notifier
from orderentry.domain.gateway.tax_rate_gateway import TaxRateGateway
from orderentry.domain.model.order import Order
from orderentry.domain.model.tax import default_tax_rate
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.domain.service.order_validator import OrderValidator

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        inventory: InventoryGateway,
        fulfillment: FulfillmentGateway,
        customer_repo: CustomerRepository,
        tax_rates: TaxRateGateway,
        notifier: Notifier,
    ) -> None:
        self._validator = OrderValidator(inventory)
        self._fulfillment = fulfillment
        self._customer_repo = customer_repo
        self._tax_rates = tax_rates
        self._notifier = notifier

    def handle(self, order: Order | None) -> OrderSummary:
        """Place an order and return its summary.

        Raises:
            ValidationError: the order broke one or more placement rules.
                Nothing was submitted.
            MissingCustomerError: the order has no customer reference.
                Nothing was submitted.
            FulfillmentError: the fulfillment system returned no confirmation.
            CustomerNotFoundError: the customer directory has no such customer.
            DefaultTaxRateMissingError: the tax schedule has no "Default" entry.
        """
        try:
            self._validator.ensure_valid(order)
        except ValidationError as exc:
            logger.warning("Order rejected: %s", exc)
            raise

        if order.customer_id is None:
            raise MissingCustomerError("Order has no customer reference")

        confirmation = self._fulfillment.submit(order)
        if confirmation is None:
            raise FulfillmentError("Fulfillment returned no confirmation")
        logger.debug(
            "Order #%s accepted for fulfillment as %s",
            confirmation.order_id,
            confirmation.order_number,
        )

        customer = self._customer_repo.get_by_id(order.customer_id)
        if customer is None:
            raise CustomerNotFoundError(f"Customer #{order.customer_id} not found")
        logger.debug(
            "Customer #%s is in %s %s",
            customer.id,
            customer.country,
            customer.postal_code,
        )

        taxes = tuple(
            self._tax_rates.get_tax_entries(customer.postal_code, customer.country)
        )
        logger.debug("Fetched %d tax entries for customer #%s", len(taxes), customer.id)

        net_total = order.net_total
        total = net_total * (Decimal("1") + default_tax_rate(taxes))

        self._notifier.send_order_confirmation(
            confirmation.customer_id, confirmation.order_id
        )

        logger.info(
            "Order %s placed for customer #%s: net %s, total %s",
            confirmation.order_number,
            confirmation.customer_id,
            net_total,
            total,
        )
        return OrderSummary(
            order_id=confirmation.order_id,
            order_number=confirmation.order_number,
            customer_id=confirmation.customer_id,
            taxes=taxes,
            net_total=net_total,
            total=total,
        )
