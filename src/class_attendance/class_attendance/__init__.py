"""Class attendance package.

Feature modules (students, attendance, reports, schedules, ...) sit behind a
thin Flask controller layer; services depend on repository protocols only.
"""
