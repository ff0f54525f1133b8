# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

from package_navigator.messages import MISSING_NAME_MESSAGE, get_detailed_error_message
from package_navigator.workspace import WorkspaceFolder


def test_no_active_file():
  assert get_detailed_error_message(None, None) == (
    "Node.js Package Navigator: No active file is currently open. "
    "Please open a file to use package navigation features."
  )


def test_file_outside_workspace(fixtures):
  orphan = str(fixtures / "no-package-json" / "src" / "orphan.txt")
  assert get_detailed_error_message(orphan, None) == (
    'Node.js Package Navigator: The file "orphan.txt" is not part of any workspace folder. '
    "Please open the file within a workspace to locate its package.json."
  )


def test_workspace_without_package_json(fixtures):
  orphan = str(fixtures / "no-package-json" / "src" / "orphan.txt")
  folder = WorkspaceFolder("no-package-json", str(fixtures / "no-package-json"))
  assert get_detailed_error_message(orphan, folder) == (
    'Node.js Package Navigator: No package.json found for "orphan.txt" in workspace "no-package-json". '
    "Make sure your project has a package.json file in the current directory "
    "or any parent directory within the workspace."
  )


def test_uses_file_and_workspace_display_names(fixtures):
  component = str(fixtures / "simple-project" / "src" / "components" / "component.txt")
  folder = WorkspaceFolder("My Project", str(fixtures / "simple-project"))
  message = get_detailed_error_message(component, folder)
  assert '"component.txt"' in message
  assert 'workspace "My Project"' in message


def test_message_is_stable_for_same_inputs():
  folder = WorkspaceFolder("ws", "/ws")
  assert get_detailed_error_message("/ws/a.txt", folder) == get_detailed_error_message("/ws/a.txt", folder)


def test_missing_name_message():
  assert MISSING_NAME_MESSAGE == (
    'Node.js Package Navigator: Package.json file is missing a "name" field or may be corrupted'
  )
