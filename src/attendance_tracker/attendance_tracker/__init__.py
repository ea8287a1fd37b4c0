"""Attendance Tracker package.

Geofenced check-in/check-out, movement tracking, leave balances and dashboard
analytics, organized by feature modules (locations, attendance, movements,
leaves, analytics) with a thin Flask controller layer over service/repository
layers.
"""
