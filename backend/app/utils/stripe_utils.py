# app/utils/stripe_utils.py
import logging

import stripe
from starlette.concurrency import run_in_threadpool

from lifelessons.core.config import settings

logger = logging.getLogger(__name__)

stripe.api_key = settings.STRIPE_SECRET_KEY


def to_minor_units(price: float) -> int:
    """Dollars to cents, rounded so 19.99 becomes 1999 and not 1998."""
    return int(round(price * 100))


async def create_payment_intent(price: float, currency: str = None) -> str:
    """
    Create a card PaymentIntent and return its client secret.
    The Stripe SDK blocks, so the call runs in the threadpool.
    """
    intent = await run_in_threadpool(
        stripe.PaymentIntent.create,
        amount=to_minor_units(price),
        currency=currency or settings.PAYMENT_CURRENCY,
        payment_method_types=["card"],
    )
    logger.info("Created payment intent %s for %s %s", intent.id, price, currency or settings.PAYMENT_CURRENCY)
    return intent.client_secret
