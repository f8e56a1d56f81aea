"""Attendance Tracker package.

Organized by feature modules (students, sections, attendance, reports, ...)
with a thin Flask controller layer over service/repository layers. All
state lives in one ``TrackerState`` persisted through a key-value store.
"""
