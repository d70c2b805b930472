#!/usr/bin/env python3
"""
Demo: Generate Markdown documentation from a recorded class.

Shows both rendering modes (SIMPLE, DETAILED).
"""

import logging

from deforder.backends import DocMode, generate_doc, save_doc_file
from deforder.config import get_config
from deforder.examples import JobRecord


def main():
    logging.basicConfig(level=get_config().log_level)

    print("=" * 80)
    print("DOC GENERATOR DEMO")
    print("=" * 80)

    for mode in [DocMode.SIMPLE, DocMode.DETAILED]:
        print(f"\n{mode.value.upper()} MODE:")
        print("-" * 80)

        print(generate_doc(JobRecord, mode=mode))

        filename = f"job_record_{mode.value}.md"
        save_doc_file(JobRecord, filename, mode=mode)
        print(f"Saved to: {filename}")

    print("=" * 80)


if __name__ == "__main__":
    main()
