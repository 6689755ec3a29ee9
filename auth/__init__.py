"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, configurable work factor)
  • Opaque session tokens (random UUID4, rotated on every login)
  • ``CredentialService`` — register / login / current-user workflow
  • Register / Login / Me API routes
"""
