"""A comment board demonstrating stored XSS and its fix.

Two pages share one in-memory comment log: ``/vulnerable`` echoes what was
posted as live markup, ``/safe`` renders it through an allow-list sanitizer
and is served with a restrictive Content-Security-Policy.
"""
