"""
Demo: Inspect the example job record and print its definition order.
"""

import logging

from deforder.config import get_config
from deforder.examples import JobRecord, build_synthesized_job_record
from deforder.inspector import inspect_type
from deforder.serialization import instance_to_yaml, record_to_yaml


def print_report(report):
    """Pretty-print a TypeReport."""
    print()
    print("=" * 70)
    print(f"DEFINITION ORDER REPORT: {report.qualname}")
    print("=" * 70)
    print()

    print("📊 RECORD")
    print(f"  Module:                {report.module}")
    print(f"  Has Record:            {'YES' if report.has_record else 'NO'}")
    print(f"  Recorded Names:        {report.record_length}")
    print(f"  Declared Members:      {len(report.declared_names)}")
    print()

    if report.members:
        print("📋 MEMBERS (definition order)")
        for member in report.members:
            flag = "" if member.present else "  (not on class)"
            print(f"  {member.position:>3}. {member.name:<24} {member.kind.value}{flag}")
        print()

    if report.kind_counts:
        print("📐 KINDS")
        for kind, count in sorted(report.kind_counts.items()):
            print(f"  {kind}: {count}")
        print()

    if report.slot_names:
        print(f"🔒 SLOTS: {', '.join(report.slot_names)}")
        print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Record matches the class!")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=get_config().log_level)

    print_report(inspect_type(JobRecord))
    print_report(inspect_type(build_synthesized_job_record()))

    job = JobRecord()
    job.employer = "Acme"
    job.title = "Engineer"
    job.start_year = 2019
    job.hours_per_week = 37
    print("Instance as YAML (definition order):")
    print(instance_to_yaml(job))

    yaml_str = record_to_yaml(JobRecord)
    with open("job_record_order.yaml", "w") as f:
        f.write(yaml_str)
    print(f"✅ Record exported to job_record_order.yaml")
