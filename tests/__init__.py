"""
propconf - Test Suite Package.

Pytest suites for properties, naming, the registry, loaders,
declaration manifests, reporting and the check command.
"""
