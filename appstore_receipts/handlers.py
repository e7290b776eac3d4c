import json
import logging

from .clients import AppStoreClient
from .dispatch import ClientException, handler
from .enums import Environment
from .exceptions import DecodeError, EncodeError
from .logging import LogLevelContext, logger
from .models import Notification


def parse_body(event):
    try:
        body = json.loads(event.get('body') or '')
    except ValueError as err:
        raise ClientException('Request body must be json') from err
    if not isinstance(body, dict):
        raise ClientException('Request body must be a json object')
    return body


@handler
def verify_receipt(event, context):
    body = parse_body(event)
    receipt_data_b64 = body.get('receiptData')
    if not receipt_data_b64:
        raise ClientException('Field `receiptData` is required')
    environment = body.get('environment', Environment.PRODUCTION)
    if environment not in Environment._ALL:
        raise ClientException(f'Field `environment` must be one of {", ".join(Environment._ALL)}')

    exclude_old_transactions = body.get('excludeOldTransactions', False)
    if not isinstance(exclude_old_transactions, bool):
        raise ClientException('Field `excludeOldTransactions` must be a boolean')

    # auto fix is consumed by a client's first verification, so each event gets a fresh client
    client = AppStoreClient(environment=environment)
    try:
        resp = client.verify_receipt(receipt_data_b64, exclude_old_transactions=exclude_old_transactions)
    except EncodeError as err:
        raise ClientException(str(err)) from err

    with LogLevelContext(logger, logging.INFO):
        logger.info(
            f'AppStore receipt verified with status `{resp.status_code}`',
            extra={'status': resp.status_code, 'environment': client.environment},
        )
    return {
        'status': resp.status_code,
        'environment': resp.environment,
        'isRetryable': resp.is_retryable,
        'latestReceiptInfo': [info.model_dump(exclude_none=True) for info in resp.latest_receipt_info],
    }


@handler
def app_store_notification(event, context):
    try:
        notification = Notification.decode(event.get('body') or '')
    except DecodeError as err:
        raise ClientException('Could not parse AppStore notification') from err

    latest = notification.unified_receipt.latest_receipt_info
    with LogLevelContext(logger, logging.INFO):
        logger.info(
            f'AppStore notification `{notification.notification_type}` received',
            extra={'environment': notification.environment, 'status': notification.unified_receipt.status},
        )
    return {
        'notificationType': notification.notification_type,
        'environment': notification.environment,
        'status': notification.unified_receipt.status,
        'originalTransactionIds': sorted(
            {info.original_transaction_id for info in latest if info.original_transaction_id}
        ),
    }
