# app/routes/payments.py
from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_email
from app.schemas.payment import PaymentCreate, PaymentIntentOut, PaymentIntentRequest
from app.utils.stripe_utils import create_payment_intent
from lifelessons.core.config import settings
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import PAYMENTS, USERS, get_database
from lifelessons.service.premium_service import record_premium_upgrade

payments_router = APIRouter(tags=["Payments"])


@payments_router.post("/create-payment-intent", response_model=PaymentIntentOut)
async def payment_intent(data: PaymentIntentRequest, email: str = Depends(get_current_email)):
    client_secret = await create_payment_intent(data.price)
    return {"clientSecret": client_secret}


@payments_router.post("/payments")
async def save_payment(data: PaymentCreate, email: str = Depends(get_current_email), db=Depends(get_database)):
    if data.email != email:
        raise ErrorResponses.FORBIDDEN

    payment = data.model_dump()
    payment["currency"] = (data.currency or settings.PAYMENT_CURRENCY).lower()
    return await record_premium_upgrade(db[PAYMENTS], db[USERS], payment)
