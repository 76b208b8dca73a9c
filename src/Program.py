import sys
import os
import json
import argparse
from datetime import date
from typing import Optional

from tax.StateDetails import StateDetails
from tax.SocialSecurityDetails import SocialSecurityDetails
from calc.benefit_calculator import BenefitCalculator
from calc.social_security_calculator import SocialSecurityCalculator
from calc.tax_compare_calculator import TaxCompareCalculator
from model.SocialSecurityResults import SocialSecurityResult
from model.TaxResults import TaxComparisonResult
from model.inputs import StateCompareInput, WorkHistory
from render.renderers import RENDERER_REGISTRY


INPUT_PARAMETERS_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', 'input-parameters'))


def load_spec(program_name: str, base_dir: Optional[str] = None) -> dict:
    """Load input-parameters/<program_name>/spec.json.

    Raises:
        FileNotFoundError: if the scenario has no spec.json
    """
    spec_path = os.path.join(base_dir or INPUT_PARAMETERS_DIR, program_name, 'spec.json')
    if not os.path.exists(spec_path):
        raise FileNotFoundError(f"Spec file not found: {spec_path}")
    with open(spec_path, 'r') as f:
        return json.load(f)


def run_state_comparison(spec: dict, state_details: StateDetails, start_year: int,
                         pair: Optional[str] = None) -> TaxComparisonResult:
    """Compare the scenario's two states; a pair slug overrides stateA/stateB."""
    section = dict(spec.get('stateComparison', {}))
    if pair:
        section['stateA'], section['stateB'] = state_details.parse_pair(pair)
    request = StateCompareInput.from_dict(section)
    return TaxCompareCalculator(state_details).compare(request, start_year)


def run_social_security(spec: dict, social_security: SocialSecurityDetails,
                        start_year: int) -> SocialSecurityResult:
    if 'socialSecurity' not in spec:
        raise ValueError("Scenario has no 'socialSecurity' section")
    history = WorkHistory.from_dict(spec['socialSecurity'])
    calculator = SocialSecurityCalculator(BenefitCalculator(social_security))
    return calculator.calculate(history, start_year)


def main():
    parser = argparse.ArgumentParser(
        description='State tax and Social Security cost calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  StateComparison  Compare income and property tax between two states (default)
  Contributions    Print yearly Social Security contributions over the working years
  Benefit          Print the estimated monthly benefit at claim age
  Projection       Print what the contributions would grow into if invested

Examples:
  python src/Program.py example
  python src/Program.py example --mode Benefit
  python src/Program.py example --pair california-vs-nevada
        """
    )
    parser.add_argument('program_name', help='Name of the program (folder in input-parameters)')
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='StateComparison',
                        help='Output mode (default: StateComparison)')
    parser.add_argument('--pair', '-p',
                        help='State pair slug such as illinois-vs-florida, overriding the scenario states')

    args = parser.parse_args()

    try:
        spec = load_spec(args.program_name)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    start_year = date.today().year
    try:
        if args.mode == 'StateComparison':
            result = run_state_comparison(spec, StateDetails.load(), start_year, args.pair)
        else:
            result = run_social_security(spec, SocialSecurityDetails.load(), start_year)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    renderer = RENDERER_REGISTRY[args.mode]()
    renderer.render(result)


if __name__ == "__main__":
    main()
