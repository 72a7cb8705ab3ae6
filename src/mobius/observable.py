# SPDX-License-Identifier: MIT

import threading
from copy import deepcopy
from typing import Callable, Optional

type Subscriber[T] = Callable[[T], None]
type Unsubscriber = Callable[[], None]


class Writable[T]:
    """
    Holds a value and notifies subscribers whenever it is replaced.

    A subscriber is called immediately with the current value and then
    after every set(). Each subscriber receives its own deep copy, so it
    can never change the held value behind the owner's back.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber[T]] = []
        self._lock = threading.RLock()

    def get(self) -> T:
        with self._lock:
            return deepcopy(self._value)

    def set(self, value: T) -> None:
        with self._lock:
            self._value = value
            subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber(deepcopy(value))

    def subscribe(self, subscriber: Subscriber[T]) -> Unsubscriber:
        with self._lock:
            self._subscribers.append(subscriber)
            value = deepcopy(self._value)
        subscriber(value)

        def unsubscribe() -> None:
            with self._lock:
                if subscriber in self._subscribers:
                    self._subscribers.remove(subscriber)

        return unsubscribe


class Derived[S, T]:
    """
    A read-only value computed from a Writable with a pure function.

    The function is re-evaluated each time the source changes, and the
    result is pushed to the derived value's own subscribers.
    """

    def __init__(self, source: Writable[S], compute: Callable[[S], T]) -> None:
        self._compute = compute
        self._value: Optional[Writable[T]] = None
        # subscribe() calls back with the current value, which creates _value
        self._unsubscribe_source = source.subscribe(self.__recompute)

    def __recompute(self, source_value: S) -> None:
        computed = self._compute(source_value)
        if self._value is None:
            self._value = Writable(computed)
        else:
            self._value.set(computed)

    def __current(self) -> Writable[T]:
        assert self._value is not None
        return self._value

    def get(self) -> T:
        return self.__current().get()

    def subscribe(self, subscriber: Subscriber[T]) -> Unsubscriber:
        return self.__current().subscribe(subscriber)

    def close(self) -> None:
        self._unsubscribe_source()
