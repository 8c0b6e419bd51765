"""Employee Directory package.

This package is organized by feature modules (users, employees, forms, ...)
with a thin Flask controller layer over service/repository layers. All data
lives in an in-memory store that emulates a remote database, including its
latency.
"""
