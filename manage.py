#!/usr/bin/env python
import os
import sys

from sea.core.management import execute_from_command_line


def main() -> None:
    os.environ.setdefault("SEA_SETTINGS_MODULE", "invoicing_app.settings")
    if len(sys.argv) < 2:
        command = "check"
        args = []
    else:
        command = sys.argv[1]
        args = sys.argv[2:]

    execute_from_command_line(command, args)


if __name__ == "__main__":
    main()
