"""Testing utilities, also usable by applications built on commentboard.

Add::

   pytest_plugins = ['commentboard.testing.fixtures']

to your `conftest.py`.
"""
