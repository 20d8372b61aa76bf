"""Payroll Department package.

Console utility for keeping payroll work types in memory. Organized by feature
modules (bonus, work_types, console) with a thin console controller layer on
top of the service/repository layers.
"""
