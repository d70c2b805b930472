"""
Example recorded classes.

JobRecord is a small declarative record of the kind serializers and
documentation tools consume: data fields, a property, a classmethod and a
method, declared in a deliberate order. build_synthesized_job_record()
builds the same members without a class body.
"""
from deforder.recorder import Ordered, make_type


class JobRecord(Ordered):
    """One job held by a survey respondent."""

    employer = ""
    title = ""
    start_year = 0
    hours_per_week = 0

    @property
    def is_full_time(self):
        """True for 35 or more hours a week."""
        return self.hours_per_week >= 35

    @classmethod
    def blank(cls):
        """A record with every field at its default."""
        return cls()

    def describe(self):
        """One-line human-readable summary."""
        return f"{self.title} at {self.employer} since {self.start_year}"


def build_synthesized_job_record(with_order: bool = False) -> type:
    """
    Build a JobRecord equivalent without a class body.

    The result has no definition order unless ``with_order`` is set, in
    which case the field order is supplied explicitly.
    """
    members = {
        "employer": "",
        "title": "",
        "start_year": 0,
        "hours_per_week": 0,
    }
    if with_order:
        return make_type("SynthesizedJobRecord", (Ordered,), members,
                         definition_order=tuple(members))
    return make_type("SynthesizedJobRecord", (Ordered,), members)
