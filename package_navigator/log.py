# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

import logging
import sys

LOGGER_NAME = "package_navigator"
CONSOLE_FORMAT = "Package Navigator: [%(levelname)s] %(message)s"


def get_logger(name=None):
  full_name = "{0}.{1}".format(LOGGER_NAME, name) if name else LOGGER_NAME
  return logging.getLogger(full_name)


def configure_logging(debug=False):
  """Point the plugin logger at the Sublime console.

  Sublime shows sys.stdout in its console, the same place print() lands.
  Each call swaps in a fresh console handler, so reloading the settings
  never doubles the output. The "debug" setting only moves the logger level.
  """
  logger = logging.getLogger(LOGGER_NAME)
  logger.setLevel(logging.DEBUG if debug else logging.INFO)
  logger.propagate = False

  logger.handlers[:] = []
  console = logging.StreamHandler(sys.stdout)
  console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
  logger.addHandler(console)
  return logger
