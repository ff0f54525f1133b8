# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

import os
import subprocess

from .log import get_logger

DEFAULT_TITLE = "Package Navigator"

# Mirrors the "terminal" entry in PackageNavigator.sublime-settings.
DEFAULT_TERMINALS = {
  "linux": ["x-terminal-emulator", "-T", "$title"],
  "osx": ["open", "-a", "Terminal", "$cwd"],
  "windows": ["cmd", "/K", "title $title"],
}

logger = get_logger("terminal")


class TerminalNotFound(Exception):
  pass


def terminal_title(package_name):
  return package_name or DEFAULT_TITLE


def build_terminal_command(template, cwd, title):
  return [arg.replace("$cwd", cwd).replace("$title", title) for arg in template]


def exists_in_path(cmd):
  # Can't search the path if a directory is specified.
  if os.path.dirname(cmd):
    return os.path.isfile(cmd)
  path = os.environ.get("PATH", "").split(os.pathsep)
  extensions = os.environ.get("PATHEXT", "").split(os.pathsep)

  # For each directory in PATH, check if it contains the specified binary.
  for directory in path:
    base = os.path.join(directory, cmd)
    options = [base] + [(base + ext) for ext in extensions if ext]
    for filename in options:
      if os.path.isfile(filename):
        return True

  return False


def launch_terminal(template, cwd, title, platform):
  """Start an external terminal in cwd. Returns the Popen handle."""
  if not template:
    template = DEFAULT_TERMINALS.get(platform)
  if not template:
    raise TerminalNotFound("No terminal configured for platform '{0}'".format(platform))

  cmd = build_terminal_command(template, cwd, title)
  if not exists_in_path(cmd[0]):
    raise TerminalNotFound("Terminal '{0}' was not found in PATH".format(cmd[0]))

  logger.debug("Running: {0} (cwd={1})".format(" ".join(cmd), cwd))
  kwargs = {}
  if platform == "windows":
    kwargs["creationflags"] = subprocess.CREATE_NEW_CONSOLE
  return subprocess.Popen(cmd, cwd=cwd, **kwargs)
