"""Tests for hockey_picks.utils.constants module."""

from hockey_picks.utils.constants import default_output_path, OUTPUT_FILENAME


class TestDefaultOutputPath:
    """Tests for default_output_path function."""

    def test_working_directory(self, tmp_path, monkeypatch):
        """Test that the report defaults to the current directory."""
        monkeypatch.delenv('HOCKEY_PICKS_DIR', raising=False)
        monkeypatch.chdir(tmp_path)
        assert default_output_path() == tmp_path / OUTPUT_FILENAME

    def test_env_directory(self, tmp_path, monkeypatch):
        """Test that HOCKEY_PICKS_DIR redirects the report."""
        monkeypatch.setenv('HOCKEY_PICKS_DIR', str(tmp_path))
        assert default_output_path() == tmp_path / 'scores.txt'

    def test_env_directory_missing(self, tmp_path, monkeypatch):
        """Test that a HOCKEY_PICKS_DIR that doesn't exist is ignored."""
        monkeypatch.setenv('HOCKEY_PICKS_DIR', str(tmp_path / 'nope'))
        monkeypatch.chdir(tmp_path)
        assert default_output_path() == tmp_path / OUTPUT_FILENAME
