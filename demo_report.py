#!/usr/bin/env python3
"""
Demo: Print the extended ASCII table in a few code pages and show the
values computed alongside it.
"""

import io

from extascii.reporter import print_extended_ascii, run_report
from extascii.serialization import state_to_yaml


def main():
    print("=" * 80)
    print("EXTENDED ASCII REPORT DEMO")
    print("=" * 80)

    for encoding in ["cp437", "cp852", "latin-1"]:
        print(f"\n{encoding.upper()}:")
        print("-" * 80)
        buffer = io.StringIO()
        count = print_extended_ascii(buffer, encoding=encoding, separator=":")
        lines = buffer.getvalue().split("\n")
        for line in lines[:8]:
            print(f"   {line}")
        print(f"   ... ({count - 8} more lines)")

    print("\nCOMPUTED VALUES:")
    print("-" * 80)
    state = run_report(io.StringIO())
    print(state_to_yaml(state))
    print("=" * 80)


if __name__ == "__main__":
    main()
