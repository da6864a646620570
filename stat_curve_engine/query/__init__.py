"""Shareable URL query decoding and encoding for the visualizers."""

from __future__ import annotations

from .codec import (
    CLTQuery,
    IntervalQuery,
    ZTestQuery,
    encode_clt_query,
    encode_curve_query,
    format_distribution,
    parse_clt_query,
    parse_curve_query,
    parse_distribution,
    parse_interval_query,
    parse_ztest_query,
)

__all__ = [
    "CLTQuery",
    "IntervalQuery",
    "ZTestQuery",
    "parse_distribution",
    "format_distribution",
    "parse_clt_query",
    "encode_clt_query",
    "parse_curve_query",
    "encode_curve_query",
    "parse_interval_query",
    "parse_ztest_query",
]
