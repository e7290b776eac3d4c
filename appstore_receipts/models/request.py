import base64
import json

from ..exceptions import EncodeError
from .base import Record


class VerificationRequest(Record):
    """
    The json body submitted to the verifyReceipt endpoint.
    https://developer.apple.com/documentation/appstorereceipts/requestbody

    `receipt_data` holds the raw (not base64 encoded) receipt bytes, encoding happens on the wire.
    `shared_secret` is the app's shared secret, only needed for receipts with auto-renewable subscriptions.
    """

    receipt_data: bytes
    shared_secret: str = ''
    # only include the latest renewal transaction for any subscriptions
    exclude_old_transactions: bool = False

    def encode(self):
        try:
            return json.dumps(
                {
                    'receipt-data': base64.b64encode(self.receipt_data).decode('ascii'),
                    'password': self.shared_secret,
                    'exclude-old-transactions': self.exclude_old_transactions,
                }
            )
        except (TypeError, ValueError) as err:
            raise EncodeError(f'Could not encode receipt verification request: {err}') from err
