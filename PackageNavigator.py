# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

import sublime, sublime_plugin
from os import path

from .package_navigator.finder import find_package_json, get_package_name, MAX_SEARCH_DEPTH
from .package_navigator.log import configure_logging, get_logger
from .package_navigator.messages import get_detailed_error_message, MISSING_NAME_MESSAGE, PREFIX
from .package_navigator.terminal import launch_terminal, terminal_title
from .package_navigator.workspace import relative_path, resolve_workspace_folder, workspace_folders

SETTINGS_FILE = "PackageNavigator.sublime-settings"

logger = get_logger()


def plugin_loaded():
  settings = sublime.load_settings(SETTINGS_FILE)
  settings.clear_on_change("package_navigator")
  settings.add_on_change("package_navigator", PluginUtils.reconfigure)
  PluginUtils.reconfigure()


def plugin_unloaded():
  sublime.load_settings(SETTINGS_FILE).clear_on_change("package_navigator")


class PackageNavigatorCommand(sublime_plugin.WindowCommand):
  """Base for every command: locate the manifest, then act on it.

  Subclasses implement on_found() and set failure_message.
  """
  failure_message = "Command failed"

  def run(self):
    view = self.window.active_view()
    file_name = view.file_name() if view else None
    sublime.set_timeout_async(lambda: self.run_async(file_name), 0)

  def run_async(self, file_name):
    logger.info("=================================")
    logger.info("Executing {0} command".format(self.name()))

    folder = self.resolve_workspace(file_name) if file_name else None
    packagejson = find_package_json(file_name, lambda f: folder, PluginUtils.get_max_depth())
    if not packagejson:
      msg = get_detailed_error_message(file_name, folder)
      logger.error("{0} failed: {1}".format(self.name(), msg))
      sublime.error_message(msg)
      return

    try:
      self.on_found(packagejson, folder)
    except Exception:
      logger.exception(self.failure_message)
      sublime.error_message(PREFIX + self.failure_message)

  def resolve_workspace(self, file_name):
    folders = workspace_folders(
      self.window.folders(), self.window.project_data(), self.window.project_file_name())
    return resolve_workspace_folder(file_name, folders)

  def on_found(self, packagejson, folder):
    raise NotImplementedError

  def copy(self, text, what):
    sublime.set_clipboard(text)
    logger.info("Copied {0}: {1}".format(what, text))
    sublime.status_message("Copied: {0}".format(text))


class OpenPackageJsonCommand(PackageNavigatorCommand):
  failure_message = "Failed to open package.json file"

  def on_found(self, packagejson, folder):
    logger.info("Opening package.json at: {0}".format(packagejson))
    self.window.open_file(packagejson)


class RevealPackageJsonCommand(PackageNavigatorCommand):
  failure_message = "Failed to reveal package.json in side bar"

  def on_found(self, packagejson, folder):
    logger.info("Revealing package.json in side bar: {0}".format(packagejson))
    view = self.window.open_file(packagejson)

    # reveal_in_side_bar acts on the active view, which must finish loading.
    def reveal():
      if view.is_loading():
        sublime.set_timeout(reveal, 50)
      else:
        self.window.run_command("reveal_in_side_bar")
    reveal()


class RevealPackageFolderCommand(PackageNavigatorCommand):
  failure_message = "Failed to reveal package folder"

  def on_found(self, packagejson, folder):
    packageDir = path.dirname(packagejson)
    logger.info("Revealing package folder: {0}".format(packageDir))
    self.window.run_command("open_dir", {"dir": packageDir})


class OpenPackageJsonInTerminalCommand(PackageNavigatorCommand):
  failure_message = "Failed to open terminal in package directory"

  def on_found(self, packagejson, folder):
    packageDir = path.dirname(packagejson)
    title = terminal_title(get_package_name(packagejson))
    logger.info("Opening terminal '{0}' in package directory: {1}".format(title, packageDir))
    launch_terminal(PluginUtils.get_terminal(), packageDir, title, sublime.platform())


class CopyPackageJsonRelativePathCommand(PackageNavigatorCommand):
  failure_message = "Failed to copy relative path"

  def on_found(self, packagejson, folder):
    self.copy(relative_path(packagejson, folder), "relative path")


class CopyPackageJsonAbsolutePathCommand(PackageNavigatorCommand):
  failure_message = "Failed to copy absolute path"

  def on_found(self, packagejson, folder):
    self.copy(packagejson, "absolute path")


class CopyPackageNameCommand(PackageNavigatorCommand):
  failure_message = "Failed to copy package name"

  def on_found(self, packagejson, folder):
    name = get_package_name(packagejson)
    if not name:
      logger.error("{0} failed: {1}".format(self.name(), MISSING_NAME_MESSAGE))
      sublime.error_message(MISSING_NAME_MESSAGE)
      return
    self.copy(name, "package name")


class PluginUtils:
  @staticmethod
  def get_pref(key, default=None):
    return sublime.load_settings(SETTINGS_FILE).get(key, default)

  @staticmethod
  def reconfigure():
    configure_logging(debug=bool(PluginUtils.get_pref("debug", False)))

  @staticmethod
  def get_max_depth():
    try:
      return int(PluginUtils.get_pref("max_search_depth", MAX_SEARCH_DEPTH))
    except (TypeError, ValueError):
      return MAX_SEARCH_DEPTH

  @staticmethod
  def get_terminal():
    platform = sublime.platform()
    terminal = (PluginUtils.get_pref("terminal") or {}).get(platform)
    logger.debug("Using terminal on '{0}': {1}".format(platform, terminal))
    return terminal
