"""
Validation Tests
================

Individual validation tests comparing DWCPN outputs to benchmarks.
"""

import numpy as np

from dwcpn.validation.benchmarks import (
    ValidationResult,
    get_benchmark,
    register_validation,
    relative_error,
)


def scenario_inputs(name: str):
    """Model inputs and settings for a reference scenario."""
    from dwcpn.config.settings import ModelInputs, ModelSettings

    scenario = get_benchmark("daily_production")["scenarios"][name]

    inputs = ModelInputs(
        lat=scenario["lat"],
        iday=scenario["iday"],
        alpha_b=scenario["alpha_b"],
        pmb=scenario["pmb"],
        chl=scenario["chl"],
        par=scenario["par"],
        z_bottom=5000.0,
        cloud=0.0,
        yel_sub=0.3,
    )
    settings = ModelSettings(profile_shape="uniform")

    return inputs, settings


def validate_scenario(name: str) -> ValidationResult:
    """
    Validate daily production for one reference scenario.

    Benchmark: DWCPN reference runs
    """
    from dwcpn.core.model import calc_pp

    benchmark = get_benchmark("daily_production")
    scenario = benchmark["scenarios"][name]

    inputs, settings = scenario_inputs(name)
    outputs = calc_pp(inputs, settings)

    error = relative_error(outputs.pp, scenario["pp"])

    return ValidationResult(
        test_name=f"daily_production_{name}",
        passed=error <= scenario["tolerance"],
        computed=outputs.pp,
        reference=scenario["pp"],
        relative_error=error,
        tolerance=scenario["tolerance"],
        benchmark_source=benchmark["source"],
        details={
            "euphotic_depth": outputs.euphotic_depth,
            "spectral_i_star": outputs.spectral_i_star,
            "failed_timesteps": outputs.failed_timesteps,
        },
    )


for _name in get_benchmark("daily_production")["scenarios"]:
    register_validation(f"daily_production_{_name}")(
        lambda _name=_name: validate_scenario(_name)
    )


@register_validation("solar_constant")
def validate_solar_constant() -> ValidationResult:
    """
    Validate the annual mean of the Thekaekara solar constant table.

    Benchmark: Thekaekara (1974)
    """
    from dwcpn.atmosphere.irradiance import lookup_thekaekara_correction

    benchmark = get_benchmark("solar_constant")

    days = np.arange(1, 366)
    computed = float(np.mean([lookup_thekaekara_correction(d) for d in days]))
    error = relative_error(computed, benchmark["value"])

    return ValidationResult(
        test_name="solar_constant",
        passed=error <= benchmark["tolerance"],
        computed=computed,
        reference=benchmark["value"],
        relative_error=error,
        tolerance=benchmark["tolerance"],
        benchmark_source=benchmark["source"],
    )
