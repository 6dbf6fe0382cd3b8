"""
Use Cases

Organized by area:
- authorization/: roles and permission lookups
- businesses/: tenant lifecycle
- team/: invitations and team membership
- clients/: customers of a business
- invoices/: invoice lifecycle and payments
- users/: registration and login
"""
