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
import typing

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from coldstream.data_models.error import AppError
from coldstream.data_models.request import AppRequest
from coldstream.data_models.request import AppResponse
from coldstream.data_models.request import GetParams
from coldstream.data_models.request import GetRequest
from coldstream.data_models.request import HttpStatus
from coldstream.data_models.request import PostRequest
from coldstream.data_models.request import User
from coldstream.reactive.handlers import ObserverHandlers
from coldstream.reactive.observable import Observable
from coldstream.utils.io.yaml_tools import yaml_load
from coldstream.utils.type_utils import StrPath

logger = logging.getLogger(__name__)


class DemoConfig(BaseModel):
    """
    Input for the sample request stream.
    """
    model_config = ConfigDict(extra="forbid")

    requests: list[AppRequest] = Field(default_factory=list, description="Requests emitted, in order, by the stream.")

    @classmethod
    def from_yaml(cls, config_file: StrPath) -> "DemoConfig":
        return cls.model_validate(yaml_load(config_file))


def sample_requests() -> list[AppRequest]:
    user = User(name="User Name", age=26, roles=["user", "admin"])

    return [
        PostRequest(host="service.example", path="user", body=user),
        GetRequest(host="service.example", path="user", params=GetParams(id="3f5h67s4s")),
    ]


def handle_request(request: AppRequest) -> AppResponse:
    match request:
        case PostRequest():
            return AppResponse(status=HttpStatus.OK, detail=f"created {request.body.name} at {request.path}")
        case GetRequest():
            return AppResponse(status=HttpStatus.OK, detail=f"fetched {request.path}/{request.params.id}")
        case _:
            typing.assert_never(request)


def handle_error(err: AppError) -> AppResponse:
    return AppResponse(status=HttpStatus.INTERNAL_SERVER_ERROR, detail=err.message)


class ResponseCollector(ObserverHandlers[AppRequest]):
    """
    Handler set answering every request and recording the responses.
    """

    def __init__(self, log: logging.Logger | None = None):
        self.responses: list[AppResponse] = []
        self.completed = False
        self._log = log if log is not None else logger

    def on_next(self, value: AppRequest) -> None:
        response = handle_request(value)
        self._log.info("%s %s/%s -> %d", value.method, value.host, value.path, response.status)
        self.responses.append(response)

    def on_error(self, exc: AppError) -> None:
        self._log.error("Request stream failed: %s", exc.message)
        self.responses.append(handle_error(exc))

    def on_complete(self) -> None:
        self._log.info("Request stream complete")
        self.completed = True


def run_request_stream(requests: list[AppRequest], log: logging.Logger | None = None) -> ResponseCollector:
    """
    Feed ``requests`` through a cold Observable and collect the responses.

    Args:
        requests (list[AppRequest]): The requests to emit.
        log (logging.Logger | None): Diagnostics sink for the handlers and the teardown.

    Returns:
        ResponseCollector: The handler set, holding the responses and completion state.
    """
    collector = ResponseCollector(log)

    subscription = Observable.from_iterable(requests, log=log).subscribe(collector)
    subscription.unsubscribe()

    return collector
