"""Attendance Dashboard package.

Feature modules (users, courses, classes, enrollments, attendance, dashboard,
campus) sit on an in-memory store and are reached through a mock API
dispatcher; a thin Flask gateway exposes the same dispatcher over HTTP.
"""
