"""gcal Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - dates/: Date expression parser and range resolver
  - commands/: Flag sets, registry, router, command handlers
  - auth/: Credentials, token file, OAuth flow
  - calendar/: Calendar API source and table renderer
- integration/: The command line driven through main()

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/dates/

    # Excluding integration tests
    pytest -m "not integration"
"""
