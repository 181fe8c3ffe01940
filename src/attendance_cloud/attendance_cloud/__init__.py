"""Attendance Cloud package.

Feature modules (attendance, dashboard) sit on top of a Firestore-backed
repository layer, with thin Flask controllers for the check-in callable and
the dashboard endpoints.
"""
