class AppStoreException(Exception):
    pass


class TransportError(AppStoreException):
    "The verification request could not be delivered, or the App Store answered with a non-2xx http status"

    def __init__(self, message, status_code=None, reason=None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class EncodeError(AppStoreException):
    pass


class DecodeError(AppStoreException):
    def __init__(self, message, body=None):
        super().__init__(message)
        self.body = body


class VerificationCancelled(AppStoreException):
    def __init__(self, url):
        self.url = url

    def __str__(self):
        return f'Verification request to `{self.url}` was cancelled'
