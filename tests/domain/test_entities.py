"""Tests for stressgen.domain.entities."""

from stressgen.domain.entities import PopulationReport, SetterOutcome
from stressgen.domain.enums import ApplyStatus


class TestSetterOutcome:
    def test_forced_counts_as_success(self):
        outcome = SetterOutcome(identity="a / -", status=ApplyStatus.APPLIED_FORCED)
        assert outcome.succeeded

    def test_skipped_is_not_success(self):
        outcome = SetterOutcome(identity="a / -", status=ApplyStatus.SKIPPED, error="boom")
        assert not outcome.succeeded
        assert outcome.error == "boom"

    def test_nested_initializer(self):
        init = SetterOutcome(identity="items / -", status=ApplyStatus.APPLIED)
        outer = SetterOutcome(identity="items / -", status=ApplyStatus.APPLIED, initializer=init)
        assert outer.initializer == init


class TestPopulationReport:
    def test_applied_and_skipped(self):
        report = PopulationReport(
            target="m.C",
            outcomes=[
                SetterOutcome(identity="a / -", status=ApplyStatus.APPLIED),
                SetterOutcome(identity="b / set_b", status=ApplyStatus.SKIPPED),
                SetterOutcome(identity="c / -", status=ApplyStatus.APPLIED_FORCED),
            ],
        )
        assert report.applied == ["a / -", "c / -"]
        assert report.skipped == ["b / set_b"]

    def test_outcome_for(self):
        report = PopulationReport(
            target="m.C",
            outcomes=[SetterOutcome(identity="a / -", status=ApplyStatus.APPLIED)],
        )
        assert report.outcome_for("a / -").status == ApplyStatus.APPLIED
        assert report.outcome_for("missing") is None

    def test_empty_report(self):
        report = PopulationReport(target="m.C")
        assert report.applied == []
        assert report.skipped == []
