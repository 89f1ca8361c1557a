"""
A thunk is a deferred computation that runs at most once.

Forcing a thunk runs its producer the first time and remembers the outcome.
Every later force hands back the remembered outcome without calling the
producer again. That outcome is either the produced value or the exception the
producer raised. Every failure is remembered, RecursionError and
KeyboardInterrupt included: a failed thunk raises the same exception again each
time it is forced and never reruns its producer.

Thunks are not thread safe. The transition from unresolved to resolved is a
plain attribute write.
"""


class Thunk:
    __slots__ = ('_producer', '_result', '_error', '_done')

    def __init__(self, producer=None):
        self._producer = producer
        self._result = None
        self._error = None
        self._done = producer is None

    @property
    def is_forced(self):
        return self._done

    def force(self):
        if not self._done:
            try:
                self._result = self._producer()
            except BaseException as e:
                self._error = e
                self._resolve()
                raise
            self._resolve()
        if self._error is not None:
            raise self._error
        return self._result

    def _resolve(self):
        self._done = True
        self._producer = None

    def __call__(self):
        return self.force()

    def __repr__(self):
        if not self._done:
            return 'Thunk(<pending>)'
        if self._error is not None:
            return 'Thunk(<raised {}>)'.format(type(self._error).__name__)
        return 'Thunk({!r})'.format(self._result)


def delay(producer):
    """wrap producer in a memoizing thunk"""
    return Thunk(producer)


def force(thunk):
    return thunk.force()
