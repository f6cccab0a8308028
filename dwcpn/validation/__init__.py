"""
Validation Suite for DWCPN
==========================

Automated checks comparing model results against reference values:

1. Daily production at reference stations
2. Published constants (Thekaekara solar constant)

Usage
-----
>>> from dwcpn.validation import run_all_validations
>>> results = run_all_validations()
>>> results.save("validation.json")

Or run a single validation:
>>> from dwcpn.validation import run_validation
>>> run_validation("solar_constant")
"""

from dwcpn.validation.benchmarks import (
    ValidationResult,
    ValidationSuite,
    REFERENCE_SCENARIOS,
    run_all_validations,
    run_validation,
    list_validations,
)

from dwcpn.validation.tests import (
    scenario_inputs,
    validate_scenario,
    validate_solar_constant,
)

__all__ = [
    # Main validation interface
    "ValidationResult",
    "ValidationSuite",
    "REFERENCE_SCENARIOS",
    "run_all_validations",
    "run_validation",
    "list_validations",
    # Individual validation tests
    "scenario_inputs",
    "validate_scenario",
    "validate_solar_constant",
]
