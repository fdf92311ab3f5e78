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

from pathlib import Path

from click.testing import CliRunner

from coldstream.cli.entrypoint import cli


def test_demo_command_samples():
    result = CliRunner().invoke(cli, ["demo"], obj={})

    assert result.exit_code == 0, result.output
    assert "200 created User Name at user" in result.output
    assert "200 fetched user/3f5h67s4s" in result.output
    assert "Stream complete" in result.output


def test_demo_command_config_file(tmp_path: Path):
    config_file = tmp_path / "requests.yml"
    config_file.write_text("requests:\n  - {method: GET, host: h, path: item, params: {id: '9'}}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--log-level", "DEBUG", "demo", "--config_file", str(config_file)], obj={})

    assert result.exit_code == 0, result.output
    assert "200 fetched item/9" in result.output


def test_demo_command_invalid_config(tmp_path: Path):
    config_file = tmp_path / "requests.yml"
    config_file.write_text("requests:\n  - {method: DELETE, host: h, path: item}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["demo", "--config_file", str(config_file)], obj={})

    assert result.exit_code != 0
    assert "Invalid configuration file" in result.output
