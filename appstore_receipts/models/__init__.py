__all__ = [
    'InAppPurchase',
    'LatestReceiptInfo',
    'Notification',
    'PendingRenewalInfo',
    'Receipt',
    'UnifiedReceipt',
    'VerificationRequest',
    'VerificationResponse',
]
from .notification import Notification, UnifiedReceipt
from .receipt import InAppPurchase, LatestReceiptInfo, PendingRenewalInfo, Receipt
from .request import VerificationRequest
from .response import VerificationResponse
