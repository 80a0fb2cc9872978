# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation Demo: defaults, builders and strict constraint checking.

Run with:
    python examples/validation_demo.py
"""

import time

from argvalidator import (
    ArgValidatorError,
    ConstraintViolation,
    format_failure,
    register_constraint,
    validate,
)


class Clock:
    def today(self):
        return time.strftime("%Y%m%d")


@register_constraint("max")
def check_max(param, value, limit):
    if value > limit:
        raise ConstraintViolation(param, value, "max", limit)


REPORT_SPECS = {
    "table": {"is": "string", "regex": "/^(users|orders|products)$/i"},
    "row_limit": {"is": "int", "max": 1000, "default": 100},
    "as_of": {"is": "string", "builder": (Clock(), "today")},
    "columns": {"is": "list", "required": False},
}


def run(title, values, specs=REPORT_SPECS):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)
    print(f"  values: {values!r}")
    try:
        result = validate(values, specs)
        print(f"  Result: OK -> {result!r}")
    except ArgValidatorError as error:
        print("  Result: REJECTED")
        for line in format_failure(error).splitlines():
            print(f"    {line}")


def main():
    run("DEMO 1: Defaults and builders fill missing parameters", {"table": "users"})
    run("DEMO 2: Explicit values win over defaults", {"table": "Orders", "row_limit": 10, "as_of": "20250101"})
    run("DEMO 3: Regex constraint rejects unknown tables", {"table": "admin_secrets"})
    run("DEMO 4: Custom 'max' constraint", {"table": "users", "row_limit": 5000})
    run("DEMO 5: Missing required parameter", {"row_limit": 5})
    run("DEMO 6: Typos in constraint names are caught", {"limit": 5}, {"limit": {"maximum": 10}})
    run("DEMO 7: Positional arguments", [1, "baz"], [{"is": "int"}, {"is": "string"}])
    run("DEMO 8: Single value shorthand", "foo", {"is": "string"})


if __name__ == "__main__":
    main()
