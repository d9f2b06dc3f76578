"""Configuration and injectable fixtures for Pytest.

DI and functions over complex inheritance hierarchies FTW!
"""
pytest_plugins = ["commentboard.testing.fixtures"]
