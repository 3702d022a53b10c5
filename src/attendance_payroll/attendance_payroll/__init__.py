"""Attendance Payroll package.

This package is organized by feature modules (calendar, attendance, leaves,
payroll, ...) with Protocol repositories at the edges and a pure salary
calculator in the middle.
"""
