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

import datetime
import typing
from enum import IntEnum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field


class HttpStatus(IntEnum):
    OK = 200
    INTERNAL_SERVER_ERROR = 500


Role = typing.Literal["user", "admin"]


class User(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    age: int = Field(ge=0)
    roles: list[Role] = Field(default_factory=list)
    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
    is_deleted: bool = False


class GetParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str


class EmptyParams(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PostRequest(BaseModel):
    """
    Creates a resource. Carries a body and no parameters.
    """
    model_config = ConfigDict(extra="forbid")

    method: typing.Literal["POST"] = "POST"
    host: str
    path: str
    body: User
    params: EmptyParams = Field(default_factory=EmptyParams)


class GetRequest(BaseModel):
    """
    Fetches a resource by id. Never carries a body.
    """
    model_config = ConfigDict(extra="forbid")

    method: typing.Literal["GET"] = "GET"
    host: str
    path: str
    params: GetParams


AppRequest = typing.Annotated[PostRequest | GetRequest, Discriminator("method")]


class AppResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: HttpStatus
    detail: str | None = Field(default=None, description="Short description of how the request was handled.")
