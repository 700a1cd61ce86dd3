"""Sample scaffolding workflow.

Cache sync, manifest parsing, variant selection, resource provisioning,
file materialization and .env composition, run in that order.
"""
