import functools
import json
import logging

logger = logging.getLogger()


def handler_logging(func):
    "Handler decorator to configure logging"

    # lambda already sets a handler for us
    for log_handler in logger.handlers:
        log_handler.setFormatter(JsonFormatter())

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except Exception as err:
            # log it ourselves in json with all the info we want, then re-raise so the caller
            # still gets an error and the uncaught exception still shows up in the platform's error metrics
            logger.exception(str(err))
            raise err

    return wrapper


# https://docs.python.org/3/howto/logging-cookbook.html#using-a-context-manager-for-selective-logging
class LogLevelContext:
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.level)

    def __exit__(self, et, ev, tb):
        self.logger.setLevel(self.old_level)


class JsonFormatter(logging.Formatter):
    "Format logging records as a single line of json"

    extras = ('environment', 'event', 'status', 'url')

    def format(self, record):
        # clear away the lambda path prefix
        prefix = '/var/task/'
        start = len(prefix) if record.pathname.startswith(prefix) else 0
        path = record.pathname[start:]

        # lambda adds the request_id to all log records, fail softly when run elsewhere
        request_id = getattr(record, 'aws_request_id', None)

        # placing `message` first keeps it visible in log viewers that truncate
        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            'requestId': request_id,
            'sourceFile': path,
            'sourceLine': record.lineno,
        }

        for extra in self.extras:
            if hasattr(record, extra):
                data[extra] = getattr(record, extra)

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            data['exceptionInfo'] = record.exc_text.split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'
