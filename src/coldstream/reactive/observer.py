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
import threading
from collections.abc import Callable
from typing import TypeVar

from coldstream.data_models.error import AppError
from coldstream.reactive.base.observer_base import ObserverBase
from coldstream.reactive.exceptions import TeardownAlreadySetError
from coldstream.reactive.handlers import CallbackHandlers

logger = logging.getLogger(__name__)

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[AppError], None]
OnComplete = Callable[[], None]
Teardown = Callable[[], None]


class Observer(ObserverBase[_T_in_contra]):
    """
    Per-subscription consumer that wraps a handler set and enforces the stream lifecycle:

    - at most one terminal signal (``on_error`` or ``on_complete``) is delivered, and it
      unsubscribes the observer;
    - once unsubscribed, every further signal is dropped;
    - the teardown routine runs at most once.

    The teardown cell exists from construction, so a producer may register its teardown
    with ``set_teardown`` before it starts emitting. A teardown assigned after the observer
    has already been unsubscribed runs immediately.
    """

    def __init__(
        self,
        on_next: ObserverBase[_T_in_contra] | OnNext | None = None,
        on_error: OnError | None = None,
        on_complete: OnComplete | None = None,
    ) -> None:
        if isinstance(on_next, ObserverBase):
            self._handlers: ObserverBase = on_next
        else:
            self._handlers = CallbackHandlers(on_next, on_error, on_complete)

        self._lock = threading.RLock()
        self._stopped = False
        self._unsubscribed = False
        self._teardown: Teardown | None = None

    @property
    def is_unsubscribed(self) -> bool:
        return self._unsubscribed

    def on_next(self, value: _T_in_contra) -> None:
        if self._stopped:
            return
        try:
            self._handlers.on_next(value)
        except Exception as exc:
            logger.debug("on_next callback raised, delivering it as an error: %s", exc, exc_info=True)
            # A failing next handler ends the stream like a delivered error
            self.on_error(AppError.from_exception(exc))

    def on_error(self, exc: AppError) -> None:
        if not self._claim_terminal():
            return
        try:
            self._handlers.on_error(exc)
        except Exception as e:
            logger.exception("Error in on_error callback: %s", e)
        finally:
            self.unsubscribe()

    def on_complete(self) -> None:
        if not self._claim_terminal():
            return
        try:
            self._handlers.on_complete()
        except Exception as e:
            logger.exception("Error in on_complete callback: %s", e)
        finally:
            self.unsubscribe()

    def unsubscribe(self) -> None:
        """
        Stop receiving signals and run the teardown, if any. Only the first call has an effect.
        """
        with self._lock:
            if self._unsubscribed:
                return
            self._unsubscribed = True
            self._stopped = True
            teardown = self._teardown

        logger.debug("Observer %s unsubscribed", id(self))

        if teardown is not None:
            teardown()

    def set_teardown(self, teardown: Teardown | None) -> None:
        """
        Assign the routine to run when this observer is unsubscribed.

        Args:
            teardown (Teardown | None): Zero-argument cleanup routine. ``None`` is ignored.

        Raises:
            TypeError: If ``teardown`` is not callable.
            TeardownAlreadySetError: If a different teardown was already assigned.
        """
        if teardown is None:
            return

        if not callable(teardown):
            raise TypeError(f"Teardown must be callable, got {type(teardown).__name__}")

        with self._lock:
            if self._teardown == teardown:
                return
            if self._teardown is not None:
                raise TeardownAlreadySetError()
            self._teardown = teardown
            run_now = self._unsubscribed

        if run_now:
            logger.debug("Observer %s already unsubscribed, running late teardown", id(self))
            teardown()

    def _claim_terminal(self) -> bool:
        with self._lock:
            if self._stopped:
                return False
            self._stopped = True
            return True
