import threading
import time


class CancellationToken:
    """
    Lets a caller abort an in-flight verification, either explicitly with `cancel()`
    or implicitly once `timeout` seconds have passed since the token was created.

    Cancelling unblocks the caller but does not stop the http request itself: its worker thread,
    and the pooled connection it holds on the client's shared session, stay busy until the server
    answers. Give the token a `timeout` to bound that, since it doubles as the request timeout.
    """

    def __init__(self, timeout=None):
        self.deadline = time.monotonic() + timeout if timeout is not None else None
        self.cancel_event = threading.Event()
        self.waiters = set()

    def cancel(self):
        self.cancel_event.set()
        for waiter in list(self.waiters):
            waiter.set()

    @property
    def cancelled(self):
        return self.cancel_event.is_set() or self.remaining() == 0

    def remaining(self):
        "Seconds left before the deadline, None if there is no deadline"
        if self.deadline is None:
            return None
        return max(self.deadline - time.monotonic(), 0)

    def run(self, func, *args, **kwargs):
        """
        Run `func` in a worker thread and block until it finishes or the token fires, whichever is first.
        Returns `(True, result)` if func finished (re-raising anything it raised), else `(False, None)`.
        """
        outcome = {}
        wakeup = threading.Event()

        def worker():
            try:
                outcome['result'] = func(*args, **kwargs)
            except Exception as err:
                outcome['error'] = err
            finally:
                wakeup.set()

        self.waiters.add(wakeup)
        try:
            if not self.cancelled:
                threading.Thread(target=worker, daemon=True).start()
                wakeup.wait(self.remaining())
        finally:
            self.waiters.discard(wakeup)

        if 'error' in outcome:
            raise outcome['error']
        if 'result' in outcome:
            return True, outcome['result']
        return False, None
