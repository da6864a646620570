"""Closed-form and approximated distribution functions.

All functions are pure and deterministic. Invalid family parameters raise
``DomainError``; evaluation points outside a support return 0.
"""

from __future__ import annotations

from .exponential import exponential_cdf, exponential_pdf, exponential_quantile
from .normal import erf, norm_s_inv, normal_cdf, normal_pdf
from .poisson import log_factorial, poisson_cdf, poisson_pmf
from .uniform import uniform_cdf, uniform_discrete_cdf, uniform_discrete_pmf, uniform_pdf

__all__ = [
    "erf",
    "normal_pdf",
    "normal_cdf",
    "norm_s_inv",
    "exponential_pdf",
    "exponential_cdf",
    "exponential_quantile",
    "uniform_pdf",
    "uniform_cdf",
    "uniform_discrete_pmf",
    "uniform_discrete_cdf",
    "log_factorial",
    "poisson_pmf",
    "poisson_cdf",
]
