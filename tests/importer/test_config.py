"""
Tests for importer.config and importer.timing
"""

import pytest

from quiz_toolkit.common.thresholds import CONFIDENCE_THRESHOLDS, SECTION_THRESHOLDS
from quiz_toolkit.importer.config import ImportConfig
from quiz_toolkit.importer.patterns import DEFAULT_PATTERNS
from quiz_toolkit.importer.timing import TimingLog, timed_stage


class TestImportConfig:
    def test_defaults_when_created_then_shared_tables(self):
        config = ImportConfig()
        assert config.max_size_mb == 10
        assert config.low_confidence_threshold == 50
        assert config.patterns is DEFAULT_PATTERNS
        assert config.section_thresholds is SECTION_THRESHOLDS
        assert config.confidence_thresholds is CONFIDENCE_THRESHOLDS
        assert config.validate_output is False

    def test_init_when_non_positive_size_then_raises_error(self):
        with pytest.raises(ValueError, match="max_size_mb"):
            ImportConfig(max_size_mb=0)

    def test_init_when_threshold_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="low_confidence_threshold"):
            ImportConfig(low_confidence_threshold=101)

    def test_config_when_frozen_then_immutable(self):
        config = ImportConfig()
        with pytest.raises(AttributeError):
            config.max_size_mb = 5


class TestTiming:
    """Tests for TimingLog and timed_stage."""

    def test_timed_stage_when_block_runs_then_recorded(self):
        log = TimingLog()

        with timed_stage(log, "extract"):
            pass

        assert "extract" in log.stage_timings
        assert log.stage_timings["extract"] >= 0.0

    def test_timed_stage_when_block_raises_then_still_recorded(self):
        log = TimingLog()

        with pytest.raises(RuntimeError):
            with timed_stage(log, "parse"):
                raise RuntimeError("boom")

        assert "parse" in log.stage_timings

    def test_log_stage_when_repeated_then_accumulates(self):
        log = TimingLog()
        log.log_stage("a", 1.0)
        log.log_stage("a", 0.5)
        log.log_stage("b", 2.0)

        assert log.to_dict() == {"a": 1.5, "b": 2.0}
        assert log.total == 3.5
        assert log.slowest() == [("b", 2.0)]
        assert "total" in log.summary()
