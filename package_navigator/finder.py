# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

import codecs
import json
from os import path

from .log import get_logger
from .workspace import is_within

PACKAGE_JSON = "package.json"
MAX_SEARCH_DEPTH = 20

logger = get_logger("finder")


def find_package_json(file_name, resolve_workspace, max_depth=MAX_SEARCH_DEPTH):
  """Return the nearest package.json above file_name, or None.

  resolve_workspace maps a file name to its WorkspaceFolder (or None). The
  walk never leaves that folder, and gives up after max_depth ascents.
  """
  if not file_name:
    logger.debug("No file available for package.json search")
    return None

  logger.debug("find_package_json called for: {0}".format(file_name))
  folder = resolve_workspace(file_name)
  if folder is None:
    logger.debug("File is not in any workspace folder")
    return None
  logger.debug("Workspace root: {0} ({1})".format(folder.name, folder.path))

  if max_depth < 1:
    max_depth = MAX_SEARCH_DEPTH

  curFolder = path.dirname(file_name)
  searchCount = 0
  while is_within(curFolder, folder.path):
    searchCount += 1
    packagejson = path.join(curFolder, PACKAGE_JSON)
    logger.debug("Search {0}: Checking '{1}'".format(searchCount, packagejson))
    if path.isfile(packagejson):
      logger.debug("Found {0}".format(packagejson))
      return packagejson

    parent = path.dirname(curFolder)
    if parent == curFolder:
      logger.debug("Reached root directory, stopping search")
      break
    curFolder = parent

    # At most max_depth directories are probed per search.
    if searchCount >= max_depth:
      logger.error("Too many search iterations, stopping to prevent infinite loop")
      break

  logger.debug("No package.json found in workspace")
  return None


def get_package_name(package_json):
  logger.debug("get_package_name called with: {0}".format(package_json))
  try:
    with codecs.open(package_json, mode="r", encoding="utf-8-sig") as f:
      contents = json.loads(f.read())
  except (OSError, ValueError, RecursionError):
    logger.exception("Failed to read {0}".format(package_json))
    return None

  name = contents.get("name") if isinstance(contents, dict) else None
  logger.debug("Parsed package name: {0}".format(name))
  if isinstance(name, str) and name:
    return name
  return None
