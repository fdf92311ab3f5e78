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

import pytest
from pydantic import ValidationError

from coldstream.data_models.error import AppError
from coldstream.data_models.request import GetParams
from coldstream.data_models.request import GetRequest
from coldstream.data_models.request import HttpStatus
from coldstream.data_models.request import PostRequest
from coldstream.data_models.request import User
from coldstream.demo.request_stream import DemoConfig
from coldstream.demo.request_stream import ResponseCollector
from coldstream.demo.request_stream import handle_error
from coldstream.demo.request_stream import handle_request
from coldstream.demo.request_stream import run_request_stream
from coldstream.demo.request_stream import sample_requests
from coldstream.reactive.observable import Observable


def test_handle_request_dispatches_on_method():
    post = PostRequest(host="h", path="user", body=User(name="Ada", age=36))
    get = GetRequest(host="h", path="user", params=GetParams(id="42"))

    assert handle_request(post).detail == "created Ada at user"
    assert handle_request(get).detail == "fetched user/42"
    assert handle_request(get).status == HttpStatus.OK


def test_handle_error():
    response = handle_error(AppError("boom"))
    assert response.status == HttpStatus.INTERNAL_SERVER_ERROR
    assert response.detail == "boom"


def test_run_request_stream_samples(caplog, test_logger):
    with caplog.at_level(logging.DEBUG, logger=test_logger.name):
        collector = run_request_stream(sample_requests(), log=test_logger)

    assert [r.status for r in collector.responses] == [HttpStatus.OK, HttpStatus.OK]
    assert collector.completed is True
    assert "Request stream complete" in caplog.text
    assert "Unsubscribed from a stream of 2 item(s)" in caplog.text


def test_run_request_stream_empty():
    collector = run_request_stream([])
    assert collector.responses == []
    assert collector.completed is True


def test_response_collector_records_error():

    def producer(observer):
        observer.on_next(sample_requests()[1])
        observer.on_error(AppError("upstream down", code=503))

    collector = ResponseCollector()
    Observable(producer).subscribe(collector)

    assert [r.status for r in collector.responses] == [HttpStatus.OK, HttpStatus.INTERNAL_SERVER_ERROR]
    assert collector.completed is False


def test_demo_config_from_yaml(tmp_path, restore_environ):
    restore_environ["DEMO_HOST"] = "api.example"
    config_file = tmp_path / "requests.yml"
    config_file.write_text(
        """
requests:
  - method: GET
    host: ${DEMO_HOST}
    path: user
    params:
      id: "7"
  - method: POST
    host: ${DEMO_HOST}
    path: user
    body:
      name: Grace
      age: 85
      roles: [admin]
""",
        encoding="utf-8",
    )

    config = DemoConfig.from_yaml(config_file)

    assert [type(r) for r in config.requests] == [GetRequest, PostRequest]
    assert all(r.host == "api.example" for r in config.requests)


def test_demo_config_rejects_extra_keys():
    with pytest.raises(ValidationError):
        DemoConfig.model_validate({"requests": [], "unexpected": True})
