"""
Tests for configuration validation.
"""

from unittest.mock import patch

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings


class TestSettingsValidation:
    """Tests for Settings.validate."""

    def test_defaults_are_valid(self):
        """Test default settings report no issues."""
        with patch.object(Settings, "OUTPUT_FORMAT", "text"), \
                patch.object(Settings, "LOG_LEVEL", "INFO"):
            assert Settings.validate() == []

    def test_unknown_output_format(self):
        """Test an unsupported output format is reported."""
        with patch.object(Settings, "OUTPUT_FORMAT", "xml"), \
                patch.object(Settings, "LOG_LEVEL", "INFO"):
            issues = Settings.validate()

        assert len(issues) == 1
        assert "OUTPUT_FORMAT" in issues[0]

    def test_unknown_log_level(self):
        """Test an unknown log level is reported."""
        with patch.object(Settings, "OUTPUT_FORMAT", "json"), \
                patch.object(Settings, "LOG_LEVEL", "chatty"):
            issues = Settings.validate()

        assert issues == ["LOG_LEVEL 'chatty' is not a known level"]

    def test_log_level_is_case_insensitive(self):
        """Test lowercase log levels are accepted."""
        with patch.object(Settings, "OUTPUT_FORMAT", "text"), \
                patch.object(Settings, "LOG_LEVEL", "debug"):
            assert Settings.validate() == []
