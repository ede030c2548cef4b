"""
Sandbox application tests.

These tests use the Flask test client against the sandbox that backs the
ui suite and demonstrate:
- Endpoint contract testing
- Input validation ordering
- Server-rendered DOM contract checks
"""
