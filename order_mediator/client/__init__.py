from .order_form_client import OrderFormClient, OrderFormClientError

__all__ = ["OrderFormClient", "OrderFormClientError"]
