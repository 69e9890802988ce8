"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

The cart is loaded from the shopper's session at the start of each request
and saved back once the intent has been applied.
"""

import logging

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import (
    DomainError,
    InvalidTicketCategoryIdError,
    PersistenceError,
    TicketCategoryNotFoundError,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore
from orders.domain import Cart, ContactInfo
from orders.domain.errors import CheckoutValidationError, OrderNotFoundError, StaleCartError
from orders.handlers.serializers import (
    AddCartItemSerializer,
    CartSerializer,
    ContactSerializer,
    OrderDetailSerializer,
    SetQuantitySerializer,
)
from orders.services.cart_service import CartService
from orders.services.checkout_service import CheckoutService, Redirect
from orders.services.order_service import OrderService
from orders.stores.django_store import DjangoInventoryOutboxStore, DjangoOrderStore
from orders.stores.session_cart import SessionCartRepository

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidTicketCategoryIdError: status.HTTP_400_BAD_REQUEST,
    CheckoutValidationError: status.HTTP_400_BAD_REQUEST,
    TicketCategoryNotFoundError: status.HTTP_404_NOT_FOUND,
    OrderNotFoundError: status.HTTP_404_NOT_FOUND,
    StaleCartError: status.HTTP_409_CONFLICT,
    PersistenceError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, CheckoutValidationError):
        body["errors"] = error.field_errors
    elif isinstance(error, StaleCartError):
        body["ticket_category_ids"] = error.ticket_category_ids
    elif isinstance(error, PersistenceError):
        logger.warning("Store unavailable during %s", error.operation)
    return Response(body, status=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST))


def cart_response(cart: Cart, status_code: int = status.HTTP_200_OK) -> Response:
    return Response(CartSerializer(cart).data, status=status_code)


class CartMixin:
    """Gives a view access to the cart owned by the requesting session."""

    def get_cart_repository(self, request: Request) -> SessionCartRepository:
        return SessionCartRepository(request.session)

    def get_cart_service(self) -> CartService:
        return CartService(EventService(DjangoEventStore()))


class CartView(CartMixin, APIView):
    """Handler for GET /api/cart"""

    def get(self, request: Request) -> Response:
        return cart_response(self.get_cart_repository(request).load())


class CartItemListView(CartMixin, APIView):
    """Handler for POST /api/cart/items"""

    def post(self, request: Request) -> Response:
        serializer = AddCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        repository = self.get_cart_repository(request)
        cart = repository.load()
        try:
            line = self.get_cart_service().add_ticket(
                cart,
                serializer.validated_data["ticket_category_id"],
                serializer.validated_data["quantity"],
            )
        except DomainError as exc:
            return error_response(exc)
        repository.save(cart)
        return cart_response(cart, status.HTTP_201_CREATED if line else status.HTTP_200_OK)


class CartItemDetailView(CartMixin, APIView):
    """Handler for PATCH/DELETE /api/cart/items/{ticket_category_id}"""

    def patch(self, request: Request, ticket_category_id: str) -> Response:
        serializer = SetQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        repository = self.get_cart_repository(request)
        cart = repository.load()
        try:
            self.get_cart_service().set_quantity(
                cart, ticket_category_id, serializer.validated_data["quantity"]
            )
        except DomainError as exc:
            return error_response(exc)
        repository.save(cart)
        return cart_response(cart)

    def delete(self, request: Request, ticket_category_id: str) -> Response:
        repository = self.get_cart_repository(request)
        cart = repository.load()
        try:
            self.get_cart_service().remove_ticket(cart, ticket_category_id)
        except DomainError as exc:
            return error_response(exc)
        repository.save(cart)
        return cart_response(cart)


class CheckoutView(CartMixin, APIView):
    """Handler for POST /api/checkout"""

    def get_service(self) -> CheckoutService:
        config = settings.STOREFRONT
        return CheckoutService(
            DjangoEventStore(),
            DjangoOrderStore(),
            DjangoInventoryOutboxStore(),
            order_number_prefix=config["ORDER_NUMBER_PREFIX"],
            max_order_number_attempts=config["ORDER_NUMBER_ATTEMPTS"],
        )

    def post(self, request: Request) -> Response:
        serializer = ContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = ContactInfo(**serializer.validated_data)

        repository = self.get_cart_repository(request)
        cart = repository.load()
        try:
            result = self.get_service().submit(contact, cart)
        except DomainError as exc:
            return error_response(exc)

        if result.redirect is Redirect.CART:
            return Response(
                {"redirect": Redirect.CART.value},
                status=status.HTTP_303_SEE_OTHER,
                headers={"Location": reverse("cart")},
            )

        repository.save(cart)
        order_number = str(result.order_number)
        return Response(
            {"order_number": order_number, "redirect": result.redirect.value},
            status=status.HTTP_201_CREATED,
            headers={"Location": reverse("order-detail", args=[order_number])},
        )


class OrderDetailView(APIView):
    """Handler for GET /api/orders/{order_number}"""

    def get_service(self) -> OrderService:
        return OrderService(DjangoOrderStore())

    def get(self, request: Request, order_number: str) -> Response:
        try:
            order = self.get_service().get_order(order_number)
        except DomainError as exc:
            return error_response(exc)
        context = {"bank_transfer": settings.STOREFRONT["BANK_TRANSFER"]}
        return Response(OrderDetailSerializer(order, context=context).data)
