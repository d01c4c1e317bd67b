"""Timekeeper package.

Organized by feature modules (accounts, punches, payroll, ...) with a thin
Flask controller layer over service/repository layers.
"""
