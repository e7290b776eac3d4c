# https://developer.apple.com/documentation/appstoreservernotifications/responsebody
from typing import List, Optional

from pydantic import Base64Bytes, Field

from ..enums import ReceiptStatus
from .base import Record, from_timestamp_ms
from .receipt import LatestReceiptInfo, PendingRenewalInfo


class UnifiedReceipt(Record):
    "The latest transaction info, carried in server notifications"

    environment: str = ''
    latest_receipt: Optional[Base64Bytes] = None
    latest_receipt_info: List[LatestReceiptInfo] = []
    pending_renewal_info: List[PendingRenewalInfo] = []
    status: int = ReceiptStatus.OK


class Notification(Record):
    "A v1 App Store server-to-server notification"

    auto_renew_adam_id: Optional[str] = None
    auto_renew_product_id: Optional[str] = None
    # 'true' or 'false'
    auto_renew_status: Optional[str] = None
    auto_renew_status_change_date: Optional[str] = None
    auto_renew_status_change_date_ms: Optional[int] = None
    auto_renew_status_change_date_pst: Optional[str] = None
    # 'Sandbox' or 'PROD'
    environment: Optional[str] = None
    expiration_intent: Optional[str] = None
    # one of enums.NotificationType
    notification_type: Optional[str] = None
    # the shared secret submitted with the receipt
    password: Optional[str] = None
    unified_receipt: UnifiedReceipt = Field(default_factory=UnifiedReceipt)
    bid: Optional[str] = None
    bvrs: Optional[str] = None

    @property
    def auto_renew_status_changed_at(self):
        return from_timestamp_ms(self.auto_renew_status_change_date_ms)
