"""Subscriptions domain - tiers, prices and manual plan activation."""

from .tiers import (
    CURRENCY,
    DEFAULT_TIERS,
    BillingCycle,
    DisplayPrice,
    PaymentInstructions,
    PlanButtonState,
    TierInfo,
    display_price,
    get_tier_info,
    payment_instructions,
    plan_button_state,
    price_amount,
)

__all__ = [
    "CURRENCY",
    "DEFAULT_TIERS",
    "BillingCycle",
    "DisplayPrice",
    "PaymentInstructions",
    "PlanButtonState",
    "TierInfo",
    "display_price",
    "get_tier_info",
    "payment_instructions",
    "plan_button_state",
    "price_amount",
]
