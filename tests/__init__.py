"""
Kiosk Notifier Tests

Running Tests:
    # Run all tests
    pytest tests -v

    # Unit tests only
    pytest tests/unit -v

    # Run specific test
    pytest tests/unit/test_planners.py::TestClientAssigned -v

Test Coverage:
    - Phone normalization and roster lookups
    - SMS templates and grouping helpers
    - Event planners (all five kiosk events)
    - Inbound command classification and side effects
    - Concurrent dispatch with partial failure
    - Infobip and staff-status HTTP clients
    - API endpoints (events, roster, inbound webhook)
"""
