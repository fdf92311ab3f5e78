# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from collections.abc import Callable
from collections.abc import Iterable
from typing import TypeVar

from coldstream.data_models.error import AppError
from coldstream.reactive.base.observable_base import ObservableBase
from coldstream.reactive.base.observer_base import ObserverBase
from coldstream.reactive.exceptions import TeardownAlreadySetError
from coldstream.reactive.observer import Observer
from coldstream.reactive.observer import Teardown
from coldstream.reactive.subscription import Subscription
from coldstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Covariant type param: An Observable producing type X can also produce
# a subtype of X.
_T_out_co = TypeVar("_T_out_co", covariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name
_U = TypeVar("_U")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[AppError], None]
OnComplete = Callable[[], None]
Producer = Callable[[Observer[_T]], Teardown | None]


class Observable(ObservableBase[_T_out_co]):
    """
    Cold stream built from a producer routine.

    The producer is not called at construction. Every ``subscribe`` creates a fresh Observer
    and runs the producer with it, so subscriptions never share state. The producer may emit
    synchronously or later from any thread or event loop, and may return a teardown routine
    which runs once when the subscription ends.

    Exceptions raised by the producer itself propagate out of ``subscribe``.
    """

    def __init__(self, producer: Producer[_T_out_co]) -> None:
        self._producer = producer

    def _subscribe_core(self, observer: Observer) -> Subscription:
        logger.debug("Running producer %s for observer %s", getattr(self._producer, "__name__", self._producer),
                     id(observer))

        teardown = self._producer(observer)

        # Runs immediately if the producer already terminated
        try:
            observer.set_teardown(teardown)
        except TeardownAlreadySetError:
            # No Subscription reaches the caller, so stop the producer here
            observer.unsubscribe()
            raise

        return Subscription(observer)

    @override
    def subscribe(self,
                  on_next: ObserverBase[_T_out_co] | OnNext[_T_out_co] | None = None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> Subscription:

        return self._subscribe_core(Observer(on_next, on_error, on_complete))

    @classmethod
    def from_iterable(cls, values: Iterable[_U], log: logging.Logger | None = None) -> "Observable[_U]":
        """
        Create an Observable that emits every element of ``values`` in order, then completes.

        The values are captured once so that every subscription replays the same sequence.

        Args:
            values (Iterable[_U]): The items to emit.
            log (logging.Logger | None): Receives a debug record when a subscription is torn down.
                Defaults to this module's logger.

        Returns:
            Observable[_U]: The cold Observable.
        """
        items = tuple(values)
        sink = log if log is not None else logger

        def _produce(observer: Observer[_U]) -> Teardown:
            for item in items:
                if observer.is_unsubscribed:
                    break
                observer.on_next(item)

            observer.on_complete()

            def _teardown() -> None:
                sink.debug("Unsubscribed from a stream of %d item(s)", len(items))

            return _teardown

        return cls(_produce)
