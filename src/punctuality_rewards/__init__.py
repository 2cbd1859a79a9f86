"""Punctuality Rewards package.

This package is organized by feature modules (checkins, stats, redemptions,
qrcodes, ...) with a thin Flask controller layer and service/repository layers.
"""
