"""
APPLICATION LAYER - Use cases

Command handlers orchestrate writes: validate against the external services,
stage writes through repositories, commit the unit of work, then dispatch
best-effort notifications. Query handlers read.
"""
