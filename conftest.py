# conftest.py

# e2e/ is on sys.path through the pytest "pythonpath" setting in pyproject.toml
pytest_plugins = ["fixtures.driver"]
