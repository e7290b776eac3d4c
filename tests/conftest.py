import base64

import pytest

from appstore_receipts import AppStoreClient, VerificationRequest


@pytest.fixture
def receipt_data():
    yield b'abc123'


@pytest.fixture
def receipt_data_b64(receipt_data):
    yield base64.b64encode(receipt_data).decode('ascii')


@pytest.fixture
def verification_request(receipt_data):
    yield VerificationRequest(receipt_data=receipt_data, shared_secret='secret', exclude_old_transactions=False)


@pytest.fixture
def appstore_client():
    yield AppStoreClient(shared_secret='secret', environment='Production', auto_fix=True)
