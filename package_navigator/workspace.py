# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

from collections import namedtuple
from os import path

WorkspaceFolder = namedtuple("WorkspaceFolder", ["name", "path"])


def _normalize(p):
  return path.normcase(path.normpath(p))


def is_within(candidate, root):
  """True if candidate is root itself or lies underneath it.

  Compares whole path segments, so /ws-a is not inside /ws.
  """
  candidate = _normalize(candidate)
  root = _normalize(root)
  if candidate == root:
    return True
  prefix = root if root.endswith(path.sep) else root + path.sep
  return candidate.startswith(prefix)


def workspace_folders(folders, project_data=None, project_file_name=None):
  """Build WorkspaceFolder entries from a window's open folders.

  `folders` is what window.folders() returns. Display names come from the
  "name" key of matching entries in the project data, when present.
  """
  names = {}
  project_dir = path.dirname(project_file_name) if project_file_name else None
  for entry in (project_data or {}).get("folders", []):
    folder_path = entry.get("path")
    name = entry.get("name")
    if not folder_path or not name:
      continue
    folder_path = path.expanduser(folder_path)
    if not path.isabs(folder_path) and project_dir:
      folder_path = path.join(project_dir, folder_path)
    names[_normalize(folder_path)] = name

  result = []
  for folder in folders:
    folder = path.normpath(folder)
    name = names.get(_normalize(folder)) or path.basename(folder) or folder
    result.append(WorkspaceFolder(name, folder))
  return result


def resolve_workspace_folder(file_name, folders):
  # Nested folders are allowed in a project; the innermost one owns the file.
  best = None
  for folder in folders:
    if is_within(file_name, folder.path):
      if best is None or len(_normalize(folder.path)) > len(_normalize(best.path)):
        best = folder
  return best


def relative_path(file_name, folder):
  return path.relpath(file_name, folder.path)
