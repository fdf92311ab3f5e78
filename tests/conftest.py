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
import os
import sys

import pytest

TESTS_DIR = os.path.dirname(__file__)
PROJECT_DIR = os.path.dirname(TESTS_DIR)
SRC_DIR = os.path.join(PROJECT_DIR, "src")
sys.path.append(SRC_DIR)

from coldstream.reactive.handlers import ObserverHandlers  # noqa: E402  # pylint: disable=wrong-import-position


class SignalRecorder(ObserverHandlers):
    """
    Records every signal it receives, in order, as ``(kind, payload)`` tuples.
    """

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def on_next(self, value):
        self.calls.append(("next", value))

    def on_error(self, exc):
        self.calls.append(("error", exc))

    def on_complete(self):
        self.calls.append(("complete", None))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]

    def values(self) -> list[object]:
        return [payload for kind, payload in self.calls if kind == "next"]


@pytest.fixture(name="project_dir")
def project_dir_fixture():
    return PROJECT_DIR


@pytest.fixture(name="recorder")
def recorder_fixture() -> SignalRecorder:
    return SignalRecorder()


@pytest.fixture(name="restore_environ")
def restore_environ_fixture():
    orig_vars = os.environ.copy()
    yield os.environ

    # Iterating over a copy of the keys as we will potentially be deleting keys in the loop
    for key in list(os.environ.keys()):
        orig_val = orig_vars.get(key)
        if orig_val is not None:
            os.environ[key] = orig_val
        else:
            del (os.environ[key])


@pytest.fixture(name="test_logger")
def test_logger_fixture() -> logging.Logger:
    return logging.getLogger("coldstream.tests")
