import os
import sys
import json
import pytest
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import Program
from model.errors import InvalidKeyError
from tax.SocialSecurityDetails import SocialSecurityDetails
from tax.StateDetails import StateDetails


def load_example_spec():
    return Program.load_spec('example')


def test_example_program_state_comparison():
    spec = load_example_spec()
    result = Program.run_state_comparison(spec, StateDetails.load(), 2025)
    assert result.comparison.state_a.state == "IL"
    assert result.comparison.state_b.state == "FL"
    assert result.comparison.delta == pytest.approx(-10350)


def test_pair_overrides_scenario_states():
    spec = load_example_spec()
    result = Program.run_state_comparison(spec, StateDetails.load(), 2025, pair="california-vs-nevada")
    assert result.comparison.state_a.state == "CA"
    assert result.comparison.state_b.state == "NV"
    assert result.comparison.state_a.income_tax > 0


def test_bad_pair_raises():
    with pytest.raises(InvalidKeyError):
        Program.run_state_comparison({}, StateDetails.load(), 2025, pair="nowhere-vs-florida")


def test_example_program_social_security():
    spec = load_example_spec()
    result = Program.run_social_security(spec, SocialSecurityDetails.load(), 2025)
    assert result.benefit.birth_year == spec['socialSecurity']['birthYear']
    assert result.contributions.first_year == spec['socialSecurity']['startYear']
    assert len(result.contributions.years) == spec['socialSecurity']['yearsWorked']


def test_social_security_section_required():
    with pytest.raises(ValueError, match="socialSecurity"):
        Program.run_social_security({}, SocialSecurityDetails.load(), 2025)


def test_missing_spec_raises():
    with pytest.raises(FileNotFoundError):
        Program.load_spec('does-not-exist')


def test_main_missing_program_exits(capsys):
    with patch.object(sys, 'argv', ['Program.py', 'does-not-exist']):
        with pytest.raises(SystemExit) as exc:
            Program.main()
    assert exc.value.code == 1
    assert "Spec file not found" in capsys.readouterr().out


@pytest.mark.parametrize("mode, expected", [
    ("StateComparison", "Taxes Saved By Moving: $10,350 Each Year"),
    ("Contributions", "ESTIMATED SOCIAL SECURITY CONTRIBUTIONS"),
    ("Benefit", "AIME:"),
    ("Projection", "Months sustained:"),
])
def test_main_renders_each_mode(capsys, mode, expected):
    with patch.object(sys, 'argv', ['Program.py', 'example', '--mode', mode]):
        Program.main()
    assert expected in capsys.readouterr().out


def test_main_invalid_input_exits(tmp_path, capsys):
    program_dir = tmp_path / 'broken'
    program_dir.mkdir()
    (program_dir / 'spec.json').write_text(json.dumps({"stateComparison": {"income": -1}}))
    with patch.object(Program, 'INPUT_PARAMETERS_DIR', str(tmp_path)), \
            patch.object(sys, 'argv', ['Program.py', 'broken']):
        with pytest.raises(SystemExit) as exc:
            Program.main()
    assert exc.value.code == 1
    assert "income" in capsys.readouterr().out
