"""Fingerprint Payroll package.

This package is organized by feature modules (attendance, shifts, payroll, ...)
around a pure calculation engine, with thin service/repository layers that
aggregate engine results for payroll and HR reports.
"""
