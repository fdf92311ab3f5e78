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

from collections.abc import Callable
from typing import TypeVar

from coldstream.data_models.error import AppError
from coldstream.reactive.base.observer_base import ObserverBase

_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[AppError], None]
OnComplete = Callable[[], None]


class ObserverHandlers(ObserverBase[_T_in_contra]):
    """
    A handler set whose slots all default to no-ops. Subclass and override only the
    signals you care about.
    """

    def on_next(self, value: _T_in_contra) -> None:
        pass

    def on_error(self, exc: AppError) -> None:
        pass

    def on_complete(self) -> None:
        pass


class CallbackHandlers(ObserverHandlers[_T_in_contra]):
    """
    Handler set built from optional plain callables. Absent callbacks are never invoked.
    """

    def __init__(
        self,
        on_next: OnNext | None = None,
        on_error: OnError | None = None,
        on_complete: OnComplete | None = None,
    ) -> None:
        self._on_next = on_next
        self._on_error = on_error
        self._on_complete = on_complete

    def on_next(self, value: _T_in_contra) -> None:
        if self._on_next is not None:
            self._on_next(value)

    def on_error(self, exc: AppError) -> None:
        if self._on_error is not None:
            self._on_error(exc)

    def on_complete(self) -> None:
        if self._on_complete is not None:
            self._on_complete()
