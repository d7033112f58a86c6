"""Payroll Portal package.

Employee attendance and payroll tracking organized by feature modules
(users, profiles, attendance, payroll) on top of a partitioned row store,
with a thin request dispatcher and a Flask binding in front of it.
"""
