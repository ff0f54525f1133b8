# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

import pytest

from tests._fixtures.trees import build_fixtures


@pytest.fixture
def fixtures(tmp_path):
  """Project trees shared by the finder and message tests."""
  return build_fixtures(tmp_path / "fixtures")
