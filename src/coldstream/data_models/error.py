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

from typing import Self


class AppError(Exception):
    """
    Failure payload delivered to a subscriber through ``on_error``.

    The core never raises it; producers pass it to ``Observer.on_error`` as data.

    Args:
        message (str): Human readable description of the failure.
        code (int | None): Optional numeric code, e.g. an HTTP status.
        cause (BaseException | None): The underlying exception, if any. Also exposed as ``__cause__``.
    """

    def __init__(self, message: str, code: int | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        self.__cause__ = cause

    @classmethod
    def from_exception(cls, exc: BaseException, code: int | None = None) -> Self:
        """
        Wrap an arbitrary exception. An AppError is returned unchanged.
        """
        if isinstance(exc, cls):
            return exc

        return cls(str(exc) or exc.__class__.__name__, code=code, cause=exc)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, cause={self.cause!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return (self.message, self.code, self.cause) == (other.message, other.code, other.cause)

    def __hash__(self) -> int:
        return hash((self.message, self.code, self.cause))
