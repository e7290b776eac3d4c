# https://developer.apple.com/documentation/appstorereceipts/verifyreceipt
import base64
import binascii
import http
import logging
import os

import requests

from ..enums import Environment, ReceiptStatus
from ..exceptions import EncodeError, TransportError, VerificationCancelled
from ..models import VerificationRequest, VerificationResponse

SHARED_SECRET = os.environ.get('APPSTORE_SHARED_SECRET')
ENVIRONMENT = os.environ.get('APPSTORE_ENVIRONMENT') or Environment.PRODUCTION
AUTO_FIX_DISABLED = os.environ.get('APPSTORE_AUTO_FIX_DISABLED')

logger = logging.getLogger()


class AppStoreClient:
    """
    Verifies receipts against the App Store's verifyReceipt endpoints.

    Auto fix handles a receipt sent to the wrong environment by resubmitting it to the other one.
    It is consumed by the first verification this client makes, whatever the outcome, so that
    a client can never bounce a receipt back and forth between the two environments.
    """

    urls = {
        Environment.PRODUCTION: 'https://buy.itunes.apple.com/verifyReceipt',
        Environment.SANDBOX: 'https://sandbox.itunes.apple.com/verifyReceipt',
    }

    def __init__(
        self,
        shared_secret=SHARED_SECRET,
        environment=ENVIRONMENT,
        auto_fix=not AUTO_FIX_DISABLED,
        session=None,
    ):
        assert environment in Environment._ALL, f"Unrecognized environment `{environment}`"
        self.shared_secret = shared_secret
        self.environment = environment
        self.auto_fix_armed = bool(auto_fix)
        self.session = session or self.build_session()

    def build_session(self):
        session = requests.Session()
        session.headers = {'Content-Type': 'application/json'}
        session.hooks = {'response': lambda r, *args, **kwargs: r.raise_for_status()}
        return session

    def replace(self, **kwargs):
        "Returns a new client with our configuration, overriden by kwargs"
        kwargs = {
            'shared_secret': self.shared_secret,
            'environment': self.environment,
            'auto_fix': self.auto_fix_armed,
            'session': self.session,
            **kwargs,
        }
        return type(self)(**kwargs)

    def use_sandbox(self):
        return self.replace(environment=Environment.SANDBOX)

    def use_production(self):
        return self.replace(environment=Environment.PRODUCTION)

    def disable_auto_fix(self):
        return self.replace(auto_fix=False)

    @property
    def url(self):
        return self.urls[self.environment]

    @property
    def is_production(self):
        return self.environment == Environment.PRODUCTION

    @property
    def is_sandbox(self):
        return self.environment == Environment.SANDBOX

    def verify_receipt(self, receipt_data_b64, exclude_old_transactions=False, cancel_token=None):
        "Verify base64-encoded receipt data as uploaded by the app. Returns the parsed VerificationResponse."
        try:
            # apps may upload line-wrapped base64
            receipt_data_b64 = receipt_data_b64[:0].join(receipt_data_b64.split())
            receipt_data = base64.b64decode(receipt_data_b64, validate=True)
        except (AttributeError, binascii.Error, TypeError, ValueError) as err:
            raise EncodeError(f'Receipt data is not valid base64: {err}') from err
        request = VerificationRequest(
            receipt_data=receipt_data,
            shared_secret=self.shared_secret or '',
            exclude_old_transactions=exclude_old_transactions,
        )
        _, response = self.verify(request, cancel_token=cancel_token)
        return response

    def verify(self, request, cancel_token=None):
        """
        Verify the receipt, correcting for a receipt sent to the wrong environment at most once.
        Returns a tuple of (raw response body, VerificationResponse).

        Raises TransportError, EncodeError, DecodeError or VerificationCancelled.
        Internal error statuses (21100-21199) are returned as-is, even when marked retryable.
        """
        body = request.encode()
        raw_body, response = self.exchange(body, cancel_token)

        if not self.auto_fix_armed:
            return raw_body, response
        self.auto_fix_armed = False

        status = response.status_code
        if status == ReceiptStatus.SANDBOX_RECEIPT_SENT_TO_PRODUCTION and self.is_production:
            # these are usually receipts from the apple review team
            self.environment = Environment.SANDBOX
        elif status == ReceiptStatus.PRODUCTION_RECEIPT_SENT_TO_SANDBOX and self.is_sandbox:
            self.environment = Environment.PRODUCTION
        else:
            return raw_body, response

        logger.warning(
            f'AppStore responded with status `{status}`, resubmitting receipt to {self.environment}',
            extra={'status': status, 'environment': self.environment},
        )
        return self.exchange(body, cancel_token)

    def exchange(self, body, cancel_token=None):
        "Post one request body to our current environment and decode the response"
        url = self.url
        logger.debug(f'Posting receipt to AppStore {self.environment}', extra={'url': url})
        if cancel_token is None:
            raw_body = self.post(url, body)
        else:
            finished, raw_body = cancel_token.run(self.post, url, body, timeout=cancel_token.remaining())
            if not finished:
                raise VerificationCancelled(url)
        return raw_body, VerificationResponse.decode(raw_body)

    def post(self, url, body, timeout=None):
        try:
            resp = self.session.post(url, data=body, timeout=timeout)
        except requests.exceptions.HTTPError as err:
            status_code = err.response.status_code
            # http/2 responses carry no reason phrase
            reason = err.response.reason or self.status_phrase(status_code)
            raise TransportError(
                f'AppStore http error ({status_code} {reason})', status_code=status_code, reason=reason
            ) from err
        except requests.exceptions.RequestException as err:
            raise TransportError(f'Could not connect to AppStore server: {err}') from err
        return resp.content

    @staticmethod
    def status_phrase(status_code):
        try:
            return http.HTTPStatus(status_code).phrase
        except ValueError:
            return ''
