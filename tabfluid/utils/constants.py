"""Numerical constants used throughout tabfluid."""

# Fractional exponents of the saturation energy curve
ONE2 = 1.0 / 2.0
ONE3 = 1.0 / 3.0

# Secant solver defaults
SECANT_TOL = 1.0e-9  # relative residual tolerance
SECANT_MAX_ITER = 20
SECANT_PERTURBATION = 1.01  # multiplicative offset of the second seed
SECANT_ZERO_STEP = 1.0e-6  # additive offset used when the seed is exactly zero

# Field names stored in a lookup table, in canonical order
FIELD_NAMES = (
    "P",
    "T",
    "h",
    "s",
    "cv",
    "cp",
    "a2",
    "dPdrho_e",
    "dPde_rho",
    "dTdrho_e",
    "dTde_rho",
)
