"""
Subscription tiers, price selection and the manual activation flow.

There is no payment processing: choosing a paid plan produces the bank
transfer instructions, and an operator upgrades the account by hand.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from teo_catalog.domain.catalog.models import SubscriptionTier, User
from teo_catalog.domain.identity import SignInRequired

CURRENCY = "EUR"


class BillingCycle(str, Enum):
    """How often a plan is billed."""

    MONTHLY = "monthly"
    ANNUALLY = "annually"


class PlanButtonState(str, Enum):
    """Label and enabled state of a tier's plan button."""

    CURRENT_PLAN = "Current Plan"
    YOUR_PLAN = "Your Plan"
    CHOOSE_PLAN = "Choose Plan"

    @property
    def enabled(self) -> bool:
        return self is PlanButtonState.CHOOSE_PLAN


@dataclass(frozen=True)
class TierInfo:
    """Display data for one subscription tier.

    Prices are display strings such as "$9.99"; the numeric amount is
    derived when payment instructions are built.
    """

    tier: SubscriptionTier
    price: str
    price_description: str
    features: tuple[str, ...] = ()
    yearly_price: Optional[str] = None
    yearly_price_description: Optional[str] = None
    yearly_discount: Optional[str] = None
    is_featured: bool = False


@dataclass(frozen=True)
class DisplayPrice:
    price: str
    description: str
    discount: Optional[str] = None


@dataclass(frozen=True)
class PaymentInstructions:
    """What the user needs to activate a plan by bank transfer."""

    tier: SubscriptionTier
    billing_cycle: BillingCycle
    amount: str
    currency: str
    reference: str
    recipient: str = "Studio Teo"
    iban: str = "DE47 3245 0000 5499 00"
    bic: str = "WELADED1KLE"
    bank: str = "Sparkasse Rhein-Maas"
    support_email: str = "support@teo.center"
    notes: tuple[str, ...] = (
        "Include your email in the transfer description.",
        "Accounts are upgraded manually within 24-48 hours of payment.",
    )


DEFAULT_TIERS: tuple[TierInfo, ...] = (
    TierInfo(
        tier=SubscriptionTier.FREE,
        price="$0",
        price_description="/ forever",
        features=(
            "Stream all official playlists",
            "Watch official videos",
            "Create your own playlists",
        ),
    ),
    TierInfo(
        tier=SubscriptionTier.PRO,
        price="$9.99",
        price_description="/ month",
        features=(
            "Everything in Free",
            "Early access to new releases",
            "Exclusive S.M.T. Selects playlists",
        ),
        yearly_price="$99.99",
        yearly_price_description="/ year",
        yearly_discount="Save 17%",
        is_featured=True,
    ),
    TierInfo(
        tier=SubscriptionTier.VIP,
        price="$24.99",
        price_description="/ month",
        features=(
            "Everything in Pro",
            "Behind-the-scenes studio content",
            "Direct feedback sessions with TeO",
        ),
        yearly_price="$249.99",
        yearly_price_description="/ year",
        yearly_discount="Save 17%",
    ),
)


def get_tier_info(tier: SubscriptionTier, tiers: tuple[TierInfo, ...] = DEFAULT_TIERS) -> TierInfo:
    """Look up the display data for a tier.

    Raises:
        KeyError: If the tier is not in the given table
    """
    for info in tiers:
        if info.tier == tier:
            return info
    raise KeyError(tier)


def _uses_annual_price(tier_info: TierInfo, cycle: BillingCycle) -> bool:
    return (
        cycle == BillingCycle.ANNUALLY
        and tier_info.tier != SubscriptionTier.FREE
        and bool(tier_info.yearly_price)
    )


def display_price(tier_info: TierInfo, cycle: BillingCycle) -> DisplayPrice:
    """Price shown on a tier card for the selected billing cycle.

    The annual price is shown only for paid tiers that have one; everything
    else falls back to the monthly price.
    """
    if _uses_annual_price(tier_info, cycle):
        return DisplayPrice(
            price=tier_info.yearly_price,
            description=tier_info.yearly_price_description or tier_info.price_description,
            discount=tier_info.yearly_discount,
        )
    return DisplayPrice(price=tier_info.price, description=tier_info.price_description)


def plan_button_state(tier_info: TierInfo, user: Optional[User]) -> PlanButtonState:
    if user is not None and user.tier == tier_info.tier:
        return PlanButtonState.CURRENT_PLAN
    if tier_info.tier == SubscriptionTier.FREE:
        return PlanButtonState.YOUR_PLAN
    return PlanButtonState.CHOOSE_PLAN


def price_amount(price: str) -> str:
    """Strip the currency symbol from a display price ("$9.99" -> "9.99")."""
    return price.replace("$", "").strip()


def payment_instructions(
    tier_info: TierInfo, cycle: BillingCycle, user: Optional[User]
) -> PaymentInstructions:
    """Build the manual activation instructions for a chosen plan.

    Args:
        tier_info: Chosen tier
        cycle: Selected billing cycle
        user: Signed-in user, or None

    Raises:
        SignInRequired: If nobody is signed in
    """
    if user is None:
        raise SignInRequired("subscribe")

    price = tier_info.yearly_price if _uses_annual_price(tier_info, cycle) else tier_info.price
    instructions = PaymentInstructions(
        tier=tier_info.tier,
        billing_cycle=cycle,
        amount=price_amount(price),
        currency=CURRENCY,
        reference=user.email,
    )
    logger.info(
        f"Payment instructions for {user.id}: {tier_info.tier.value} ({cycle.value}) "
        f"{instructions.amount} {CURRENCY}"
    )
    return instructions
