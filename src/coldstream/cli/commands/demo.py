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
from pathlib import Path

import click

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config_file",
              type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
              required=False,
              default=None,
              help="YAML file with a `requests` list. The built-in sample requests are used when omitted.")
def demo_command(config_file: Path | None):
    """Stream sample requests through an Observable and print the responses"""
    # load function level dependencies
    from pydantic import ValidationError

    from coldstream.demo.request_stream import DemoConfig
    from coldstream.demo.request_stream import run_request_stream
    from coldstream.demo.request_stream import sample_requests

    if config_file is not None:
        try:
            requests = DemoConfig.from_yaml(config_file).requests
        except (ValidationError, ValueError) as e:
            click.echo(click.style(f"✗ Invalid configuration file: {config_file}", fg="red"))
            raise click.ClickException(str(e)) from e
    else:
        requests = sample_requests()

    collector = run_request_stream(requests, log=logger)

    for response in collector.responses:
        click.echo(f"{int(response.status)} {response.detail or ''}".rstrip())

    if collector.completed:
        click.echo(click.style("✓ Stream complete", fg="green"))
