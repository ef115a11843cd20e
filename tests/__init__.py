"""
Root tests package. Only this directory carries an __init__.py; test subdirectories work as
namespace packages (PEP 420).

Keeping it here lets test modules import shared fixtures as `tests.helpers...`.
"""
