"""Linear interpolation helpers shared by the spectral modules."""

import numpy as np


def linear_interp(x_values, y_values, x):
    """
    Linearly interpolate ``y_values`` at ``x``.

    Parameters
    ----------
    x_values : array_like
        Monotonically increasing sample positions
    y_values : array_like
        Sample values, same length as ``x_values``
    x : float or array_like
        Position(s) to evaluate

    Returns
    -------
    y : float or ndarray
        Interpolated value(s); positions outside the table take the nearest
        end value
    """
    x_values = np.asarray(x_values, dtype=float)
    y_values = np.asarray(y_values, dtype=float)

    if x_values.shape != y_values.shape:
        raise ValueError(
            f"x and y tables must have the same shape, "
            f"got {x_values.shape} and {y_values.shape}"
        )

    return np.interp(x, x_values, y_values)


def interpolate_spectrum(input_wavelengths, input_values, output_wavelengths) -> np.ndarray:
    """Resample a spectrum onto another wavelength grid."""
    return np.asarray(
        linear_interp(input_wavelengths, input_values, np.asarray(output_wavelengths, dtype=float)),
        dtype=float,
    )
