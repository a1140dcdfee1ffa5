"""Ponto (time clock) package.

Feature modules (punches, hours, employees, reports) hold the domain; the
hours engine is pure and the Flask controllers plus MySQL repositories are a
thin layer around it.
"""
