"""
Unit Tests — CLI
================
Startup screen selection and exit codes, with the terminal app mocked.
"""
from unittest.mock import patch

import pytest

from daily.cli import initial_state, main
from daily.models.app_config import AppConfig
from daily.models.field_mapping import FieldMapping
from daily.services.config_store import ConfigStore
from daily.state.wizard_state import SetupState, WizardState

from conftest import FORM_ID, FORM_URL


class TestInitialState:

    def test_empty_config_opens_setup(self):
        assert isinstance(initial_state(AppConfig()), SetupState)

    def test_incomplete_mapping_opens_setup(self):
        config = AppConfig(form_url=FORM_URL, field_mappings=FieldMapping(date="1"))
        assert isinstance(initial_state(config), SetupState)

    def test_unrecognisable_url_opens_setup(self, mapping):
        config = AppConfig(form_url="https://example.com/form", field_mappings=mapping)
        assert isinstance(initial_state(config), SetupState)

    def test_ready_config_opens_wizard_with_canonical_url(self, mapping):
        config = AppConfig(form_url=f"https://docs.google.com/forms/d/e/{FORM_ID}/viewform", field_mappings=mapping)
        state = initial_state(config)
        assert isinstance(state, WizardState)
        assert state.form_url == FORM_URL
        assert state.focus == 0
        assert state.field_mappings == mapping


class TestMain:

    @pytest.fixture(autouse=True)
    def quiet_logging(self):
        with patch("daily.cli.setup_logging"):
            yield

    def test_runs_app_and_exits_zero(self, tmp_path):
        with patch("daily.cli.SUBMIT_MODE", "post"), patch("daily.cli.DailyApp") as mock_app:
            code = main(config_store=ConfigStore(tmp_path))

        assert code == 0
        args, kwargs = mock_app.call_args
        assert isinstance(args[0], SetupState)
        assert args[1].submit_mode == "post"
        assert kwargs["submit_label"] == "Submit Report"
        mock_app.return_value.run.assert_called_once()

    def test_saved_config_starts_wizard(self, tmp_path, mapping):
        store = ConfigStore(tmp_path)
        store.save(AppConfig(form_url=FORM_URL, field_mappings=mapping))
        with patch("daily.cli.SUBMIT_MODE", "browser"), patch("daily.cli.DailyApp") as mock_app:
            assert main(config_store=store) == 0
        assert isinstance(mock_app.call_args.args[0], WizardState)

    def test_terminal_failure_exits_nonzero(self, tmp_path, capsys):
        with patch("daily.cli.SUBMIT_MODE", "browser"), patch("daily.cli.DailyApp") as mock_app:
            mock_app.return_value.run.side_effect = RuntimeError("not a terminal")
            code = main(config_store=ConfigStore(tmp_path))

        assert code == 1
        assert "Error running program: not a terminal" in capsys.readouterr().err

    def test_unknown_submit_mode_exits_nonzero(self, tmp_path, capsys):
        with patch("daily.cli.SUBMIT_MODE", "fax"), patch("daily.cli.DailyApp") as mock_app:
            code = main(config_store=ConfigStore(tmp_path))

        assert code == 1
        mock_app.assert_not_called()
        assert "unknown submit mode 'fax'" in capsys.readouterr().err

    def test_logging_failure_exits_nonzero(self, tmp_path, capsys):
        with patch("daily.cli.setup_logging", side_effect=PermissionError("read-only")):
            code = main(config_store=ConfigStore(tmp_path))

        assert code == 1
        assert "could not set up logging" in capsys.readouterr().err
