# https://developer.apple.com/documentation/appstorereceipts


class Environment:
    PRODUCTION = 'Production'
    SANDBOX = 'Sandbox'

    _ALL = (PRODUCTION, SANDBOX)


class ReceiptStatus:
    "https://developer.apple.com/documentation/appstorereceipts/status"

    # undocumented, but does occur
    UNKNOWN = -1

    OK = 0
    APP_STORE_CANNOT_READ = 21000
    NO_LONGER_SENT = 21001
    DATA_MALFORMED = 21002
    NOT_AUTHENTICATED = 21003
    SHARED_SECRET_DOES_NOT_MATCH = 21004
    RECEIPT_SERVER_UNAVAILABLE = 21005
    # only returned for iOS 6-style transaction receipts for auto-renewable subscriptions
    VALID_BUT_SUBSCRIPTION_EXPIRED = 21006
    SANDBOX_RECEIPT_SENT_TO_PRODUCTION = 21007
    PRODUCTION_RECEIPT_SENT_TO_SANDBOX = 21008
    BAD_ACCESS = 21009
    COULD_NOT_BE_AUTHORIZED = 21010

    # 21100-21199 are various internal data access errors
    INTERNAL_ERROR_MIN = 21100
    INTERNAL_ERROR_MAX = 21199

    @classmethod
    def is_internal_error(cls, status):
        return cls.INTERNAL_ERROR_MIN <= status <= cls.INTERNAL_ERROR_MAX


class InAppOwnershipType:
    FAMILY_SHARED = 'FAMILY_SHARED'
    PURCHASED = 'PURCHASED'

    _ALL = (FAMILY_SHARED, PURCHASED)


class AutoRenewStatus:
    OFF = '0'
    ON = '1'

    _ALL = (OFF, ON)


class BillingRetryStatus:
    STOPPED_ATTEMPTING_RENEWAL = '0'
    ATTEMPTING_RENEWAL = '1'

    _ALL = (STOPPED_ATTEMPTING_RENEWAL, ATTEMPTING_RENEWAL)


class ExpirationIntent:
    VOLUNTARILY_CANCELLED = '1'
    BILLING_ISSUE = '2'
    DID_NOT_ACCEPT_PRICE_INCREASE = '3'
    PRODUCT_NOT_AVAILABLE = '4'
    UNKNOWN = '5'

    _ALL = (VOLUNTARILY_CANCELLED, BILLING_ISSUE, DID_NOT_ACCEPT_PRICE_INCREASE, PRODUCT_NOT_AVAILABLE, UNKNOWN)


class PriceConsentStatus:
    # field is absent unless a price increase was announced
    NOT_REQUESTED = ''
    AWAITING_CONSENT = '0'
    CONSENTED = '1'

    _ALL = (NOT_REQUESTED, AWAITING_CONSENT, CONSENTED)


class NotificationType:
    "https://developer.apple.com/documentation/appstoreservernotifications/notification_type"

    CANCEL = 'CANCEL'
    DID_CHANGE_RENEWAL_PREF = 'DID_CHANGE_RENEWAL_PREF'
    DID_CHANGE_RENEWAL_STATUS = 'DID_CHANGE_RENEWAL_STATUS'
    DID_FAIL_TO_RENEW = 'DID_FAIL_TO_RENEW'
    DID_RECOVER = 'DID_RECOVER'
    DID_RENEW = 'DID_RENEW'
    INITIAL_BUY = 'INITIAL_BUY'
    INTERACTIVE_RENEWAL = 'INTERACTIVE_RENEWAL'
    PRICE_INCREASE_CONSENT = 'PRICE_INCREASE_CONSENT'
    REFUND = 'REFUND'

    _ALL = (
        CANCEL,
        DID_CHANGE_RENEWAL_PREF,
        DID_CHANGE_RENEWAL_STATUS,
        DID_FAIL_TO_RENEW,
        DID_RECOVER,
        DID_RENEW,
        INITIAL_BUY,
        INTERACTIVE_RENEWAL,
        PRICE_INCREASE_CONSENT,
        REFUND,
    )
