"""
Job board project package.

Holds settings, URL routing, the shared error taxonomy and the
database health probe used by the API and the ``check_database`` command.
"""
