"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error kinds raised by concepts and mapped to HTTP statuses
- security: Password hashing and session token signing
"""
