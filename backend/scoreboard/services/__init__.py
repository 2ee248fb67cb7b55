"""Token issuance and database access.

Routes import from here so that HTTP concerns stay in the blueprints and
signing/persistence details stay out of them.
"""
