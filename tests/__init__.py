"""
Test suites for uiflows.

unit - helpers and page objects against mocked Playwright objects
ui   - page objects driving a real browser against the local sandbox
e2e  - admin and storefront workflows against the live deployment
"""
