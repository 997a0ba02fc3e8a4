"""Payment models."""

from .base import ApiModel


class PaymentIntent(ApiModel):
    """Stripe PaymentIntent used by the front end to collect payment"""
    client_secret: str
    payment_intent_id: str
    amount: int
    currency: str
