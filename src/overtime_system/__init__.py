"""Overtime System package.

This package is organized by feature modules (employees, overtime, payroll, ...)
with a thin Flask controller layer and service/repository layers around a pure
overtime valuation and aggregation core.
"""
