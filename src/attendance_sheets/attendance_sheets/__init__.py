"""Attendance Sheets package.

HR attendance / leave backend organized by feature modules (users, attendance,
leave, ...) with a thin Flask controller layer over services that keep an
in-memory mirror and a Google spreadsheet in step.
"""
