import base64
import json

import pendulum
import pytest

from appstore_receipts import DecodeError, EncodeError, VerificationRequest, VerificationResponse
from appstore_receipts.enums import AutoRenewStatus, InAppOwnershipType, NotificationType, ReceiptStatus
from appstore_receipts.models import Notification

# trimmed down from an actual sandbox response
response_body = {
    'status': 0,
    'environment': 'Sandbox',
    'receipt': {
        'receipt_type': 'ProductionSandbox',
        'bundle_id': 'app.real.mobile',
        'application_version': '52',
        'original_application_version': '1.0',
        'receipt_creation_date_ms': '1604592938000',
        'in_app': [
            {
                'quantity': '1',
                'product_id': 'diamond',
                'transaction_id': '1000000735366917',
                'original_transaction_id': '1000000735366917',
                'purchase_date_ms': '1604592934000',
                'expires_date_ms': '1604593234000',
                'is_trial_period': 'false',
                'is_in_intro_offer_period': 'false',
            }
        ],
    },
    'latest_receipt_info': [
        {
            'quantity': '1',
            'product_id': 'diamond',
            'transaction_id': '1000000735370107',
            'original_transaction_id': '1000000735366917',
            'purchase_date_ms': '1604593234000',
            'expires_date_ms': '1604593534000',
            'is_trial_period': 'true',
            'in_app_ownership_type': 'PURCHASED',
            'subscription_group_identifier': '20674941',
        }
    ],
    'latest_receipt': base64.b64encode(b'the-latest-receipt').decode(),
    'pending_renewal_info': [
        {
            'auto_renew_product_id': 'diamond',
            'product_id': 'diamond',
            'original_transaction_id': '1000000735366917',
            'auto_renew_status': '1',
        }
    ],
    'some_new_field_from_apple': {'ignored': True},
}


def test_request_encode():
    request = VerificationRequest(receipt_data=b'abc123', shared_secret='secret', exclude_old_transactions=True)
    assert json.loads(request.encode()) == {
        'receipt-data': 'YWJjMTIz',
        'password': 'secret',
        'exclude-old-transactions': True,
    }


def test_request_defaults_and_immutability():
    request = VerificationRequest(receipt_data=b'abc123')
    assert request.shared_secret == ''
    assert request.exclude_old_transactions is False
    with pytest.raises(Exception):
        request.shared_secret = 'changed'


def test_request_encode_error():
    request = VerificationRequest.model_construct(receipt_data=None, shared_secret='secret')
    with pytest.raises(EncodeError, match='Could not encode'):
        request.encode()


def test_response_decode():
    raw_body = json.dumps(response_body).encode()
    resp = VerificationResponse.decode(raw_body)
    assert resp.status_code == ReceiptStatus.OK
    assert resp.environment == 'Sandbox'
    assert resp.raw_body == raw_body
    assert resp.is_retryable is False
    assert resp.latest_receipt == b'the-latest-receipt'
    assert resp.latest_expired_receipt_info is None

    assert resp.receipt.bundle_id == 'app.real.mobile'
    assert resp.receipt.created_at == pendulum.datetime(2020, 11, 5, 16, 15, 38)
    in_app = resp.receipt.in_app[0]
    assert in_app.quantity == 1
    assert in_app.is_trial_period is False
    assert in_app.purchased_at == pendulum.datetime(2020, 11, 5, 16, 15, 34)
    assert in_app.expires_at == pendulum.datetime(2020, 11, 5, 16, 20, 34)
    assert in_app.cancelled_at is None

    info = resp.latest_receipt_info[0]
    assert info.is_trial_period is True
    assert info.in_app_ownership_type == InAppOwnershipType.PURCHASED
    assert info.original_transaction_id == '1000000735366917'

    renewal = resp.pending_renewal_info[0]
    assert renewal.auto_renew_status == AutoRenewStatus.ON
    assert renewal.expiration_intent is None
    assert renewal.grace_period_expires_at is None


def test_response_decode_defaults():
    resp = VerificationResponse.decode(b'{}')
    assert resp.status_code == ReceiptStatus.OK
    assert resp.environment == ''
    assert resp.receipt.in_app == []
    assert resp.latest_receipt is None
    assert resp.latest_receipt_info == []
    assert resp.pending_renewal_info == []


def test_response_decode_internal_error():
    resp = VerificationResponse.decode(b'{"status": 21150, "is-retryable": true}')
    assert resp.status_code == 21150
    assert ReceiptStatus.is_internal_error(resp.status_code)
    assert resp.is_retryable is True
    assert not resp.is_valid


@pytest.mark.parametrize(
    'body',
    [b'', b'{not json', b'"a string"', b'{"status": "nope"}', b'{"latest_receipt_info": "nope"}', b'\xff\xfe'],
)
def test_response_decode_error(body):
    with pytest.raises(DecodeError) as exc_info:
        VerificationResponse.decode(body)
    assert exc_info.value.body == body
    assert exc_info.value.__cause__ is not None or body == b'"a string"'


def test_notification_decode():
    body = json.dumps(
        {
            'notification_type': 'DID_RENEW',
            'environment': 'PROD',
            'password': 'secret',
            'auto_renew_status': 'true',
            'auto_renew_product_id': 'diamond',
            'auto_renew_status_change_date_ms': '1604592938000',
            'bid': 'app.real.mobile',
            'bvrs': '52',
            'unified_receipt': {
                'status': 0,
                'environment': 'Production',
                'latest_receipt_info': response_body['latest_receipt_info'],
                'pending_renewal_info': response_body['pending_renewal_info'],
            },
        }
    )
    notification = Notification.decode(body)
    assert notification.notification_type == NotificationType.DID_RENEW
    assert notification.environment == 'PROD'
    assert notification.bid == 'app.real.mobile'
    assert notification.auto_renew_status_changed_at == pendulum.datetime(2020, 11, 5, 16, 15, 38)
    assert notification.unified_receipt.status == 0
    assert notification.unified_receipt.latest_receipt_info[0].transaction_id == '1000000735370107'
    assert notification.unified_receipt.pending_renewal_info[0].product_id == 'diamond'


def test_notification_decode_error():
    with pytest.raises(DecodeError):
        Notification.decode('[]')


@pytest.mark.parametrize(
    'body',
    [
        b'{"status": null}',
        b'{"status": 0, "receipt": null}',
        b'{"status": 0, "latest_receipt_info": null, "pending_renewal_info": null, "is-retryable": null}',
        b'{"status": 0, "receipt": {"bundle_id": null, "in_app": null}}',
    ],
)
def test_response_decode_nulls_as_absent(body):
    resp = VerificationResponse.decode(body)
    assert resp.status_code == ReceiptStatus.OK
    assert resp.receipt.bundle_id is None
    assert resp.receipt.in_app == []
    assert resp.latest_receipt_info == []
    assert resp.pending_renewal_info == []
    assert resp.is_retryable is False


def test_notification_decode_null_unified_receipt():
    notification = Notification.decode('{"notification_type": "CANCEL", "unified_receipt": null}')
    assert notification.unified_receipt.status == ReceiptStatus.OK
    assert notification.unified_receipt.latest_receipt_info == []


@pytest.mark.parametrize('key', ['creation_date_ms', 'receipt_creation_date_ms'])
def test_receipt_creation_date_spellings(key):
    resp = VerificationResponse.decode(json.dumps({'receipt': {key: '1604592938000'}}))
    assert resp.receipt.created_at == pendulum.datetime(2020, 11, 5, 16, 15, 38)
