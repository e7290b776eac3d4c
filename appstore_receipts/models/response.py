from typing import List, Optional

from pydantic import Base64Bytes, Field

from ..enums import ReceiptStatus
from .base import Record
from .receipt import InAppPurchase, LatestReceiptInfo, PendingRenewalInfo, Receipt


class VerificationResponse(Record):
    "https://developer.apple.com/documentation/appstorereceipts/responsebody"

    # 0 if the receipt is valid, otherwise one of enums.ReceiptStatus
    status_code: int = Field(ReceiptStatus.OK, alias='status')
    # the environment the receipt was generated in, 'Sandbox' or 'Production'
    environment: str = ''
    receipt: Receipt = Field(default_factory=Receipt)
    # only returned for receipts that contain auto-renewable subscriptions
    latest_receipt: Optional[Base64Bytes] = None
    latest_receipt_info: List[LatestReceiptInfo] = []
    latest_expired_receipt_info: Optional[InAppPurchase] = None
    pending_renewal_info: List[PendingRenewalInfo] = []
    # only applicable to status codes 21100-21199
    is_retryable: bool = Field(False, alias='is-retryable')
    raw_body: bytes = Field(b'', exclude=True)

    @classmethod
    def decode(cls, body):
        return super().decode(body, raw_body=body)

    @property
    def is_valid(self):
        return self.status_code == ReceiptStatus.OK
