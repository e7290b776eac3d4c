__all__ = [
    'AppStoreClient',
]
from .appstore import AppStoreClient
