"""Unit tests for UniversalAPI core functionality.

Unit tests should:
- Not require external services (database, Redis)
- Test individual functions and classes in isolation
- Use mocks for dependencies
- Be fast to execute
"""
