"""
Configuration Tests

Tests reader configuration defaults and validation.

Run with: pytest tests/test_config.py -v
"""

import pytest

from chainstats import clean_config, validate_config


class TestCleanConfig:
    """Test default filling."""

    def test_sets_defaults(self):
        cfg = clean_config({'path': 'draws.csv'})
        assert cfg['skip_rows'] == 0
        assert cfg['n_rows'] is None
        assert cfg['delimiter'] == ','

    def test_keeps_user_values(self):
        cfg = clean_config({'path': 'draws.csv', 'skip_rows': 3, 'delimiter': ';'})
        assert cfg['skip_rows'] == 3
        assert cfg['delimiter'] == ';'


class TestValidateConfig:
    """Test reader configuration validation."""

    def test_valid_config(self):
        validate_config({'path': 'draws.csv', 'skip_rows': 1, 'n_rows': 10, 'delimiter': ','})

    def test_missing_path(self):
        with pytest.raises(ValueError, match="path"):
            validate_config({'skip_rows': 0})

    @pytest.mark.parametrize("skip_rows", [-1, 1.5, True, "1"])
    def test_bad_skip_rows(self, skip_rows):
        with pytest.raises(ValueError, match="skip_rows"):
            validate_config({'path': 'x', 'skip_rows': skip_rows})

    def test_n_rows_none_allowed(self):
        validate_config({'path': 'x', 'n_rows': None})

    def test_bad_n_rows(self):
        with pytest.raises(ValueError, match="n_rows"):
            validate_config({'path': 'x', 'n_rows': -2})

    @pytest.mark.parametrize("delimiter", ["", ",,", "\n", 5])
    def test_bad_delimiter(self, delimiter):
        with pytest.raises(ValueError, match="delimiter"):
            validate_config({'path': 'x', 'delimiter': delimiter})

    def test_reports_all_errors(self):
        with pytest.raises(ValueError) as exc_info:
            validate_config({'skip_rows': -1, 'n_rows': -1, 'delimiter': ''})
        message = str(exc_info.value)
        assert "path" in message
        assert "skip_rows" in message
        assert "n_rows" in message
        assert "delimiter" in message
