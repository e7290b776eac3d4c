# https://developer.apple.com/documentation/appstorereceipts/responsebody
from typing import List, Optional

from .base import Record, from_timestamp_ms


class InAppPurchase(Record):
    """
    An in-app purchase transaction, as found in `receipt.in_app` and `latest_receipt_info`.

    Apple sends numbers and booleans in here as strings, ex: `"quantity": "1"`, `"is_trial_period": "false"`.
    """

    cancellation_date: Optional[str] = None
    cancellation_date_ms: Optional[int] = None
    cancellation_date_pst: Optional[str] = None
    # "1": customer cancelled due to an issue in the app, "0": any other reason
    cancellation_reason: Optional[str] = None
    expires_date: Optional[str] = None
    expires_date_ms: Optional[int] = None
    expires_date_pst: Optional[str] = None
    is_in_intro_offer_period: Optional[bool] = None
    is_trial_period: Optional[bool] = None
    is_upgraded: Optional[bool] = None
    offer_code_ref_name: Optional[str] = None
    original_purchase_date: Optional[str] = None
    original_purchase_date_ms: Optional[int] = None
    original_purchase_date_pst: Optional[str] = None
    original_transaction_id: Optional[str] = None
    product_id: Optional[str] = None
    promotional_offer_id: Optional[str] = None
    purchase_date: Optional[str] = None
    purchase_date_ms: Optional[int] = None
    purchase_date_pst: Optional[str] = None
    quantity: Optional[int] = None
    subscription_group_identifier: Optional[str] = None
    transaction_id: Optional[str] = None
    web_order_line_item_id: Optional[str] = None

    @property
    def purchased_at(self):
        return from_timestamp_ms(self.purchase_date_ms)

    @property
    def original_purchased_at(self):
        return from_timestamp_ms(self.original_purchase_date_ms)

    @property
    def expires_at(self):
        return from_timestamp_ms(self.expires_date_ms)

    @property
    def cancelled_at(self):
        return from_timestamp_ms(self.cancellation_date_ms)


class LatestReceiptInfo(InAppPurchase):
    # one of enums.InAppOwnershipType
    in_app_ownership_type: Optional[str] = None


class PendingRenewalInfo(Record):
    auto_renew_product_id: Optional[str] = None
    # one of enums.AutoRenewStatus
    auto_renew_status: Optional[str] = None
    # one of enums.ExpirationIntent
    expiration_intent: Optional[str] = None
    grace_period_expires_date: Optional[str] = None
    grace_period_expires_date_ms: Optional[int] = None
    grace_period_expires_date_pst: Optional[str] = None
    # one of enums.BillingRetryStatus
    is_in_billing_retry_period: Optional[str] = None
    offer_code_ref_name: Optional[str] = None
    original_transaction_id: Optional[str] = None
    # one of enums.PriceConsentStatus
    price_consent_status: Optional[str] = None
    product_id: Optional[str] = None

    @property
    def grace_period_expires_at(self):
        return from_timestamp_ms(self.grace_period_expires_date_ms)


class Receipt(Record):
    "A json representation of the receipt that was sent for verification"

    adam_id: Optional[int] = None
    app_item_id: Optional[int] = None
    application_version: Optional[str] = None
    bundle_id: Optional[str] = None
    # an empty list is a valid receipt
    in_app: List[InAppPurchase] = []
    original_application_version: Optional[str] = None
    original_purchase_date: Optional[str] = None
    original_purchase_date_ms: Optional[int] = None
    creation_date: Optional[str] = None
    creation_date_ms: Optional[int] = None
    creation_date_pst: Optional[str] = None
    receipt_creation_date: Optional[str] = None
    receipt_creation_date_ms: Optional[int] = None
    receipt_creation_date_pst: Optional[str] = None
    expiration_date: Optional[str] = None
    expiration_date_ms: Optional[int] = None
    expiration_date_pst: Optional[str] = None
    receipt_type: Optional[str] = None
    request_date: Optional[str] = None
    request_date_ms: Optional[int] = None

    @property
    def created_at(self):
        ms = self.receipt_creation_date_ms if self.receipt_creation_date_ms is not None else self.creation_date_ms
        return from_timestamp_ms(ms)

    @property
    def expires_at(self):
        return from_timestamp_ms(self.expiration_date_ms)
