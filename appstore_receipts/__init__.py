__all__ = [
    'AppStoreClient',
    'AppStoreException',
    'CancellationToken',
    'DecodeError',
    'EncodeError',
    'Environment',
    'ReceiptStatus',
    'TransportError',
    'VerificationCancelled',
    'VerificationRequest',
    'VerificationResponse',
]
from .cancellation import CancellationToken
from .clients import AppStoreClient
from .enums import Environment, ReceiptStatus
from .exceptions import AppStoreException, DecodeError, EncodeError, TransportError, VerificationCancelled
from .models import VerificationRequest, VerificationResponse
