"""Numeric policy shared by every tolerant comparison in geome."""

# Tolerance for approx(): |a-b| <= EPSILON * max(1, |a|, |b|)
EPSILON = 1e-6
