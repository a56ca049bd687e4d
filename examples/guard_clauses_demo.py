# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import logging
import os

# Log every failed check at DEBUG level for this demo.
os.environ.setdefault("GUARDCLAUSE_LOG_FAILURES", "1")

from guardclause import argument
from guardclause.exceptions import ArgumentError, DoubleEnumerationError
from guardclause.extensible import extension

# Basic logging setup
logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')


# --- A custom check that lives next to the built-in ones ---

@extension
def port(name, value):
    """Valid TCP port: 1..65535."""
    argument.not_null_and_cast(name, value, int)
    argument.greater_than(name, value, 0)
    return argument.less_than_or_equal_to(name, value, 65535)


class Connection:
    def __init__(self, host, port, tags, retries=3, timeout=1.5):
        self.host = argument.not_null_or_whitespace("host", host)
        self.port = argument.ex.port("port", port)
        self.tags = argument.not_null_or_empty("tags", tags)
        self.retries = argument.positive_or_zero("retries", retries)
        self.timeout = argument.less_than("timeout", argument.greater_than("timeout", timeout, 0.0), 30.0)

    def __repr__(self):
        return f"Connection({self.host}:{self.port}, tags={self.tags}, retries={self.retries})"


def main():
    print("--- valid arguments ---")
    print(Connection("db.internal", 5432, ["primary"]))

    attempts = [
        ("blank host", lambda: Connection("   ", 5432, ["primary"])),
        ("port out of range", lambda: Connection("db.internal", 70000, ["primary"])),
        ("port of wrong type", lambda: Connection("db.internal", "5432", ["primary"])),
        ("no tags", lambda: Connection("db.internal", 5432, [])),
        ("negative retries", lambda: Connection("db.internal", 5432, ["primary"], retries=-1)),
        ("zero timeout", lambda: Connection("db.internal", 5432, ["primary"], timeout=0.0)),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except ArgumentError as error:
            print(f"{label:>20}: {type(error).__name__} on '{error.param_name}': {error.message}")

    print("--- single-pass iterables are refused ---")
    tags = (t for t in ["primary", "replica"])
    try:
        Connection("db.internal", 5432, tags)
    except DoubleEnumerationError as error:
        print(error)
    print(Connection("db.internal", 5432, list(tags)))


if __name__ == "__main__":
    main()
