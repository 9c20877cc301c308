# lifelessons/service/premium_service.py
import logging
from datetime import datetime, timezone

from pymongo.errors import DuplicateKeyError, PyMongoError

from lifelessons.core.error_messages import ErrorResponses
from lifelessons.serialize import insert_result, update_result

logger = logging.getLogger(__name__)


async def record_premium_upgrade(payments, users, payment: dict) -> dict:
    """
    Store the payment, then mark its payer premium.

    The two writes hit different documents without a transaction. If the
    second one fails the payment stays recorded and the user is not premium;
    that window is logged and left for manual repair.
    """
    now = datetime.now(timezone.utc)
    try:
        payment_result = await payments.insert_one({**payment, "paidAt": now})
    except DuplicateKeyError:
        raise ErrorResponses.DUPLICATE_PAYMENT from None

    try:
        user_result = await users.update_one(
            {"email": payment["email"]},
            {"$set": {"isPremium": True, "premiumSince": now}},
        )
    except PyMongoError:
        logger.error(
            "Payment %s recorded but premium flag not set for %s",
            payment.get("transactionId"), payment["email"],
        )
        raise

    if user_result.matched_count == 0:
        logger.warning(
            "Payment %s recorded for unknown user %s", payment.get("transactionId"), payment["email"]
        )
    else:
        logger.info("User %s upgraded to premium", payment["email"])

    return {"paymentResult": insert_result(payment_result), "updateResult": update_result(user_result)}
