# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""tagbump: bump a semantic version tag from a branch's commit history.

Commit messages (conventional commit types, ``BREAKING CHANGE:``
footers, legacy ``#major``/``#minor``/``#patch`` markers) and the labels
of issues closed by ``fix #N`` commits decide how far the version moves;
non-release branches get a pre-release keyed by the branch name.
"""

__version__ = '0.1.0'
