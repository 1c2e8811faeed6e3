"""Notification event coalescing service.

Ensures the local ``notifyhub`` package is resolved as a regular package.
"""
