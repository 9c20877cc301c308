from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class PaymentIntentRequest(BaseModel):
    price: float = Field(..., gt=0)


class PaymentIntentOut(BaseModel):
    clientSecret: str


class PaymentCreate(BaseModel):
    email: EmailStr
    amount: float = Field(..., gt=0)
    currency: Optional[str] = None
    transactionId: str = Field(..., min_length=1)
