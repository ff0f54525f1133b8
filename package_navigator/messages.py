# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

from os import path

PREFIX = "Node.js Package Navigator: "

NO_ACTIVE_FILE = (
  PREFIX + "No active file is currently open. "
  "Please open a file to use package navigation features."
)
OUTSIDE_WORKSPACE = (
  PREFIX + 'The file "{file}" is not part of any workspace folder. '
  "Please open the file within a workspace to locate its package.json."
)
NOT_FOUND = (
  PREFIX + 'No package.json found for "{file}" in workspace "{workspace}". '
  "Make sure your project has a package.json file in the current directory "
  "or any parent directory within the workspace."
)
MISSING_NAME_MESSAGE = (
  PREFIX + 'Package.json file is missing a "name" field or may be corrupted'
)


def get_detailed_error_message(file_name, workspace_folder):
  """Explain why no package.json could be located for file_name.

  workspace_folder must be the same lookup result the search used, so the
  message matches the boundary the search saw.
  """
  if not file_name:
    return NO_ACTIVE_FILE

  base = path.basename(file_name) or "unknown"
  if workspace_folder is None:
    return OUTSIDE_WORKSPACE.format(file=base)
  return NOT_FOUND.format(file=base, workspace=workspace_folder.name)
