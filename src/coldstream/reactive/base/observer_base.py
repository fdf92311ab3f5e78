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

import typing
from abc import ABC
from abc import abstractmethod
from typing import Generic
from typing import TypeVar

if typing.TYPE_CHECKING:
    from coldstream.data_models.error import AppError

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name


class ObserverBase(Generic[_T_in_contra], ABC):
    """
    Abstract base class for anything that can receive the signals of an Observable.

    Once on_error or on_complete is called, no further signal is expected.
    """

    @abstractmethod
    def on_next(self, value: _T_in_contra) -> None:
        """
        Called when the producer emits a new item.
        """
        pass

    @abstractmethod
    def on_error(self, exc: "AppError") -> None:
        """
        Called when the producer signals a failure. Terminal.
        """
        pass

    @abstractmethod
    def on_complete(self) -> None:
        """
        Called when the producer signals that no more items will follow. Terminal.
        """
        pass
