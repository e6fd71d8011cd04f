"""Move directories to the user's trash."""

import logging
import os
import shutil
import subprocess
from datetime import datetime

from gwh.errors import OperationFailedError, TrashUnavailableError

logger = logging.getLogger(__name__)

TRASH_COMMANDS = (
    ("trash", ()),
    ("gio", ("trash",)),
    ("trash-put", ()),
)


def _trash_command(target):
    for name, prefix in TRASH_COMMANDS:
        executable = shutil.which(name)
        if executable:
            return [executable, *prefix, target]
    return None


def move_to_trash(target, home=None, now=None):
    """Move target to the trash.

    Uses the first available trash command. Without one, falls back to
    renaming into ~/.Trash/<name>.<timestamp> when that directory exists.

    Raises:
        OperationFailedError: If the trash command or rename fails.
        TrashUnavailableError: If no trash mechanism is available.
    """
    cmd = _trash_command(target)
    if cmd is not None:
        logger.debug("trashing with %s", " ".join(cmd))
        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode != 0:
            raise OperationFailedError(result.stderr.strip() or f"Unable to trash: {target}")
        return

    home = home or os.path.expanduser("~")
    trash_dir = os.path.join(home, ".Trash")
    if not os.path.isdir(trash_dir):
        raise TrashUnavailableError("no trash command found; use --force to delete permanently")

    timestamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    destination = os.path.join(trash_dir, f"{os.path.basename(os.path.normpath(target))}.{timestamp}")
    logger.debug("moving %s to %s", target, destination)
    try:
        os.rename(target, destination)
    except OSError as e:
        raise OperationFailedError(f"Unable to move {target} to trash: {e}")
