"""
Validation Benchmark Framework
==============================

Provides a framework for comparing DWCPN outputs against reference daily
production values and published constants.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Callable, Any

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Result from a single validation test.

    Attributes
    ----------
    test_name : str
        Name of the validation test
    passed : bool
        Whether the test passed
    computed : float
        Value produced by the model
    reference : float
        Benchmark value
    relative_error : float
        Relative error (%)
    tolerance : float
        Relative tolerance for pass/fail (%)
    benchmark_source : str
        Source of benchmark data
    details : dict
        Additional test details
    """
    test_name: str
    passed: bool
    computed: float
    reference: float
    relative_error: float
    tolerance: float
    benchmark_source: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        return (
            f"{self.test_name}: {status}\n"
            f"  Computed: {self.computed:.4g} (reference: {self.reference:.4g})\n"
            f"  Relative Error: {self.relative_error:.2f}% (tolerance: {self.tolerance:.2f}%)\n"
            f"  Benchmark: {self.benchmark_source}"
        )


@dataclass
class ValidationSuite:
    """
    Collection of validation results.

    Attributes
    ----------
    results : list of ValidationResult
        Individual test results
    """
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def n_tests(self) -> int:
        """Total number of tests."""
        return len(self.results)

    @property
    def n_passed(self) -> int:
        """Number of passed tests."""
        return sum(1 for r in self.results if r.passed)

    def add_result(self, result: ValidationResult) -> None:
        """Add a validation result."""
        self.results.append(result)

    def print_summary(self) -> None:
        """Print summary of validation results."""
        print("\n" + "=" * 60)
        print("DWCPN Validation Summary")
        print("=" * 60)
        print(f"Tests: {self.n_passed}/{self.n_tests} passed")
        print("-" * 60)

        for result in self.results:
            status = "[PASS]" if result.passed else "[FAIL]"
            print(f"{status} {result.test_name}: "
                  f"{result.computed:.4g} vs {result.reference:.4g} "
                  f"({result.relative_error:.2f}%, tol={result.tolerance:.2f}%)")

        print("=" * 60)
        n_failed = self.n_tests - self.n_passed
        if n_failed == 0:
            print("All validations PASSED")
        else:
            print(f"WARNING: {n_failed} validation(s) FAILED")
        print()

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON export."""
        return {
            "n_tests": self.n_tests,
            "n_passed": self.n_passed,
            "results": [
                {
                    "test_name": r.test_name,
                    "passed": r.passed,
                    "computed": float(r.computed),
                    "reference": float(r.reference),
                    "relative_error": float(r.relative_error),
                    "tolerance": float(r.tolerance),
                    "benchmark_source": r.benchmark_source,
                }
                for r in self.results
            ],
        }

    def save(self, filepath: str) -> None:
        """Save validation results to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


# =============================================================================
# Benchmark Data
# =============================================================================

# Daily production at single stations. Only the surface chlorophyll is
# recorded for each station, so the runs here use a uniform profile and a
# clear sky.
REFERENCE_SCENARIOS = {
    "equatorial_atlantic_jan": {
        "lat": -5.792, "iday": 1, "alpha_b": 0.0844, "pmb": 4.756,
        "chl": 0.26096588, "par": 49.1697464,
        "pp": 721.7, "tolerance": 2.0,
    },
    "north_atlantic_may": {
        "lat": 43.2, "iday": 121, "alpha_b": 0.0578, "pmb": 3.294,
        "chl": 0.474, "par": 50.35,
        "pp": 905.19, "tolerance": 5.0,
    },
    "south_pacific_gyre_may": {
        "lat": -27.042, "iday": 121, "alpha_b": 0.0933, "pmb": 1.594,
        "chl": 0.058, "par": 25.482,
        "pp": 108.63, "tolerance": 5.0,
    },
    "mauritanian_upwelling_may": {
        "lat": 18.71, "iday": 121, "alpha_b": 0.1518, "pmb": 3.9059,
        "chl": 1.718, "par": 55.8677,
        "pp": 2341.99, "tolerance": 1.0,
    },
    "caribbean_may": {
        "lat": 12.542, "iday": 121, "alpha_b": 0.1329, "pmb": 3.952,
        "chl": 0.1032, "par": 56.255,
        "pp": 694.43, "tolerance": 0.1,
    },
}

BENCHMARKS = {
    "daily_production": {
        "source": "DWCPN reference runs (Platt & Sathyendranath model)",
        "scenarios": REFERENCE_SCENARIOS,
    },
    "solar_constant": {
        "source": "Thekaekara (1974), annual mean solar constant",
        "value": 1353.0,
        "tolerance": 0.5,  # %
    },
}


def get_benchmark(name: str) -> Dict:
    """
    Get benchmark data by name.

    Parameters
    ----------
    name : str
        Benchmark name

    Returns
    -------
    benchmark : dict
        Benchmark data and metadata

    Raises
    ------
    KeyError
        If benchmark not found
    """
    if name not in BENCHMARKS:
        raise KeyError(
            f"Unknown benchmark: {name}. "
            f"Available: {list(BENCHMARKS.keys())}"
        )
    return BENCHMARKS[name]


# =============================================================================
# Validation Runner
# =============================================================================

# Registry of validation tests
_VALIDATION_TESTS: Dict[str, Callable] = {}


def register_validation(name: str):
    """Decorator to register a validation test."""
    def decorator(func: Callable):
        _VALIDATION_TESTS[name] = func
        return func
    return decorator


def list_validations() -> List[str]:
    """List available validation tests."""
    from dwcpn.validation import tests  # noqa: F401  (registers the tests)
    return list(_VALIDATION_TESTS.keys())


def run_validation(name: str) -> ValidationResult:
    """
    Run a single validation test.

    Parameters
    ----------
    name : str
        Name of validation test

    Returns
    -------
    result : ValidationResult
        Validation result
    """
    if name not in list_validations():
        raise KeyError(
            f"Unknown validation: {name}. "
            f"Available: {list_validations()}"
        )

    return _VALIDATION_TESTS[name]()


def run_all_validations(verbose: bool = True) -> ValidationSuite:
    """
    Run all validation tests.

    Parameters
    ----------
    verbose : bool
        Print progress during validation

    Returns
    -------
    suite : ValidationSuite
        Complete validation results
    """
    suite = ValidationSuite()

    for name in list_validations():
        if verbose:
            print(f"Running validation: {name}...")

        try:
            result = run_validation(name)
        except Exception as e:
            logger.warning(f"Validation {name} failed with error: {e}")
            result = ValidationResult(
                test_name=name,
                passed=False,
                computed=np.nan,
                reference=np.nan,
                relative_error=100.0,
                tolerance=0.0,
                benchmark_source="error",
                details={"error": str(e)},
            )

        suite.add_result(result)

        if verbose:
            status = "PASSED" if result.passed else "FAILED"
            print(f"  {status} (error: {result.relative_error:.2f}%)")

    if verbose:
        suite.print_summary()

    return suite


def relative_error(computed: float, reference: float) -> float:
    """Relative error in percent (absolute error if the reference is zero)."""
    if reference == 0:
        return float(abs(computed))
    return float(abs((computed - reference) / reference) * 100.0)
