"""AttendX package.

Employees, departments and daily attendance behind a small JSON API, with the
single-page frontend served from the same Flask process. Each feature module
(employees, departments, attendance) has its own model, repository, service
and controller layers.
"""
