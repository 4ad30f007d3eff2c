"""Patients application for the clinic backend.

This package contains the user and appointment models, the command and
query services around patient records, and the API and SPA views.
"""
