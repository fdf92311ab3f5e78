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

import os
import sys
from typing import TypeAlias

# Mimic the `StrPath` type alias from the `typeshed` package. We can't import it directly because it's not available at
# runtime and causes problems
StrPath: TypeAlias = str | os.PathLike[str]

# A compatibility layer for typing.override decorator.
# In Python >= 3.12, it uses the built-in typing.override decorator
# In Python < 3.12, it acts as a no-op decorator
if sys.version_info >= (3, 12):
    from typing import override  # pylint: disable=unused-import
else:

    def override(func):
        return func
